"""Observer - a subject pushing state changes to attached observers."""

from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink


class Observer(ABC):
    @abstractmethod
    def update(self, value: int) -> None:
        pass


class Subject:
    """
    Holds a state value and an ordered list of observers it does not own.

    ``set_state`` notifies synchronously, in attachment order. Attaching or
    detaching from inside ``update`` is not supported.
    """

    def __init__(self):
        self._observers: List[Observer] = []
        self._state = 0
        self._logger = get_logger(__name__)

    @property
    def state(self) -> int:
        return self._state

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> bool:
        """Remove the first attachment of ``observer`` by identity."""
        for index, attached in enumerate(self._observers):
            if attached is observer:
                del self._observers[index]
                return True
        return False

    def set_state(self, value: int) -> None:
        self._state = value
        self._notify()

    def _notify(self) -> None:
        self._logger.debug("Notifying observers", state=self._state, count=len(self._observers))
        for observer in self._observers:
            observer.update(self._state)


class ConcreteObserver(Observer):
    def __init__(self, name: str, output: Optional[OutputSink] = None):
        self.name = name
        self._output = resolve_sink(output)

    def update(self, value: int) -> None:
        self._output.emit(f"{self.name} received update: {value}")
