"""Prototype - objects that produce independent copies of themselves."""

from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink


class Prototype(ABC):
    """Something that can clone and describe itself."""

    @abstractmethod
    def clone(self) -> "Prototype":
        """Return an independent polymorphic copy."""
        pass

    @abstractmethod
    def describe(self) -> List[str]:
        """Emit and return a description of the object."""
        pass


class GameCharacter(Prototype):
    """
    Concrete prototype owning a byte buffer.

    The buffer starts as ``0, 1, ..., allocate_size - 1``. ``clone()`` copies
    the buffer, so later writes to the original never reach a clone taken
    earlier (and vice versa). The size and the values are bytes, so both
    wrap modulo 256.
    """

    def __init__(self, name: str, allocate_size: int, output: Optional[OutputSink] = None):
        self._name = name
        self._allocate_size = allocate_size % 256
        self._array = bytearray(range(self._allocate_size))
        self._output = output

    @property
    def name(self) -> str:
        return self._name

    @property
    def allocate_size(self) -> int:
        return self._allocate_size

    @property
    def values(self) -> List[int]:
        """Snapshot of the buffer contents."""
        return list(self._array)

    def clone(self) -> "GameCharacter":
        cloned = GameCharacter(self._name, self._allocate_size, self._output)
        cloned._array = bytearray(self._array)
        return cloned

    def describe(self) -> List[str]:
        lines = [f"GameCharacter name = {self._name} allocated elements: "]
        lines.extend(f"Value {index}: {value}" for index, value in enumerate(self._array))
        sink = resolve_sink(self._output)
        for line in lines:
            sink.emit(line)
        return lines

    def set_name(self, name: str) -> None:
        self._name = name

    def update_array(self, index: int, value: int) -> bool:
        """Write one slot. An out-of-range index is ignored and returns False."""
        if 0 <= index < self._allocate_size:
            self._array[index] = value % 256
            return True
        return False

    def fill_array(self, value: int) -> None:
        """Set every slot to ``value``."""
        for index in range(self._allocate_size):
            self._array[index] = value % 256

    def get_value(self, index: int) -> Optional[int]:
        """Read one slot, or None when the index is out of range."""
        if 0 <= index < self._allocate_size:
            return self._array[index]
        return None
