"""Composite - leaves and containers serialized through one interface.

A container's bytes are the concatenation of its children's bytes in
insertion order, so serializing any tree equals the pre-order concatenation
of its leaves.
"""

import struct
from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink

# Fixed-width little-endian signed 32-bit integer
LEAF_FORMAT = "<i"
LEAF_SIZE = struct.calcsize(LEAF_FORMAT)
LEAF_MODULUS = 1 << (8 * LEAF_SIZE)


def wrap_int32(value: int) -> int:
    """Wrap any int into the signed 32-bit range, two's complement style."""
    value %= LEAF_MODULUS
    if value >= LEAF_MODULUS // 2:
        value -= LEAF_MODULUS
    return value


class Serializable(ABC):
    """Component interface shared by leaves and composites."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = output

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def serialize(self) -> bytes:
        """Convert the object's data to bytes."""
        pass

    def _emit(self, message: str) -> None:
        resolve_sink(self._output).emit(message)


class SimpleData(Serializable):
    """Leaf holding a single signed 32-bit integer; wider values wrap on construction."""

    def __init__(self, value: int, output: Optional[OutputSink] = None):
        super().__init__(output)
        self._value = wrap_int32(value)

    @property
    def value(self) -> int:
        return self._value

    @property
    def name(self) -> str:
        return "Leaf (SimpleData)"

    def serialize(self) -> bytes:
        result = struct.pack(LEAF_FORMAT, self._value)
        self._emit(f"[Serializing {self.name} with value {self._value} - Bytes: {len(result)}]")
        return result


class ComplexObject(Serializable):
    """Composite that exclusively owns an ordered list of children."""

    def __init__(self, object_name: str, output: Optional[OutputSink] = None):
        super().__init__(output)
        self._object_name = object_name
        self._children: List[Serializable] = []

    @property
    def name(self) -> str:
        return f"Composite ({self._object_name})"

    @property
    def children(self) -> List[Serializable]:
        return list(self._children)

    def add(self, component: Serializable) -> "ComplexObject":
        self._children.append(component)
        return self

    def remove(self, component: Serializable) -> bool:
        """Detach a child by identity."""
        for index, child in enumerate(self._children):
            if child is component:
                del self._children[index]
                return True
        return False

    def serialize(self) -> bytes:
        self._emit(f"--- Starting serialization of {self.name} ---")
        final_bytes = b"".join(child.serialize() for child in self._children)
        self._emit(
            f"--- Finished serialization of {self.name} - Total Bytes: {len(final_bytes)} ---"
        )
        return final_bytes
