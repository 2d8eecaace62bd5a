"""Chain of Responsibility - input validators evaluated link by link.

Each link either rejects (emitting its reason) and stops the chain, or hands
the input to the next link. A chain with no links accepts everything.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink


class Validator(ABC):
    """One link in the validation chain."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._next: Optional["Validator"] = None
        self._output = output
        self._logger = get_logger(__name__)

    @property
    def next(self) -> Optional["Validator"]:
        return self._next

    def set_next(self, validator: "Validator") -> "Validator":
        """Link ``validator`` after this one and return it, so links can be chained."""
        self._next = validator
        return validator

    def validate(self, value: str) -> bool:
        if not self.check(value):
            return False
        if self._next is not None:
            return self._next.validate(value)
        return True

    @abstractmethod
    def check(self, value: str) -> bool:
        """Check this link's rule only."""
        pass

    def _reject(self, reason: str) -> bool:
        self._logger.info("Validation rejected", validator=type(self).__name__, reason=reason)
        resolve_sink(self._output).emit(f"Validate Error! {reason}")
        return False


class NotEmpty(Validator):
    def check(self, value: str) -> bool:
        if not value:
            return self._reject("Input is empty!")
        return True


class MinLength(Validator):
    def __init__(self, length: int, output: Optional[OutputSink] = None):
        super().__init__(output)
        self.length = length

    def check(self, value: str) -> bool:
        if len(value) < self.length:
            return self._reject(f"Size is smaller than {self.length}!")
        return True


class NoSpaces(Validator):
    """Rejects input containing any whitespace character."""

    def check(self, value: str) -> bool:
        if any(ch.isspace() for ch in value):
            return self._reject("Input has space character!")
        return True


class ValidatorChain:
    """Keeps head and tail so validators are appended in registration order."""

    def __init__(self):
        self._head: Optional[Validator] = None
        self._tail: Optional[Validator] = None

    def add(self, validator: Validator) -> "ValidatorChain":
        """Append ``validator`` as the new last link, dropping any link it carried from another chain."""
        validator._next = None
        if self._head is None:
            self._head = validator
            self._tail = validator
        else:
            self._tail = self._tail.set_next(validator)
        return self

    @property
    def validators(self) -> List[Validator]:
        links = []
        current = self._head
        while current is not None:
            links.append(current)
            current = current.next
        return links

    def validate(self, value: str) -> bool:
        if self._head is None:
            return True
        return self._head.validate(value)
