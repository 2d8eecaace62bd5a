"""Memento - snapshots of an originator's state kept by a caretaker."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from design_patterns.infrastructure.output import OutputSink, resolve_sink


class Memento(BaseModel):
    """Opaque, immutable snapshot."""

    model_config = ConfigDict(frozen=True)

    state: int


class Originator:
    def __init__(self, output: Optional[OutputSink] = None):
        self._state = 0
        self._output = resolve_sink(output)

    @property
    def state(self) -> int:
        return self._state

    def set_state(self, state: int) -> None:
        self._state = state
        self._output.emit(f"State set to {state}")

    def save(self) -> Memento:
        return Memento(state=self._state)

    def restore(self, memento: Optional[Memento]) -> bool:
        """Restore from a snapshot. A missing snapshot is ignored."""
        if memento is None:
            return False
        self._state = memento.state
        self._output.emit(f"State restored to {self._state}")
        return True


class Caretaker:
    """Owns the history of snapshots; never looks inside them."""

    def __init__(self):
        self._history: List[Memento] = []

    def add_memento(self, memento: Memento) -> None:
        self._history.append(memento)

    def get_memento(self, index: int) -> Optional[Memento]:
        """Snapshot at ``index``, or None when out of range."""
        if 0 <= index < len(self._history):
            return self._history[index]
        return None

    def __len__(self) -> int:
        return len(self._history)
