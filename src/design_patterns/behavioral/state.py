"""State - a traffic light whose behaviour is delegated to its current state object."""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink


class TrafficLightState(ABC):
    """Handles a request, then may replace the context's state."""

    name = "Unknown"

    @abstractmethod
    def handle(self, context: "TrafficLight") -> None:
        pass


class RedState(TrafficLightState):
    name = "Red"

    def handle(self, context: "TrafficLight") -> None:
        context.emit("Red Light")
        context.set_state(GreenState())


class GreenState(TrafficLightState):
    name = "Green"

    def handle(self, context: "TrafficLight") -> None:
        context.emit("Green Light")
        context.set_state(YellowState())


class YellowState(TrafficLightState):
    name = "Yellow"

    def handle(self, context: "TrafficLight") -> None:
        context.emit("Yellow Light")
        context.set_state(RedState())


class TrafficLight:
    """Context holding the single current state."""

    def __init__(self, state: Optional[TrafficLightState] = None, output: Optional[OutputSink] = None):
        self._state = state
        self._output = resolve_sink(output)
        self._logger = get_logger(__name__)

    @property
    def state(self) -> Optional[TrafficLightState]:
        return self._state

    def set_state(self, state: TrafficLightState) -> None:
        previous = self._state.name if self._state is not None else None
        self._state = state
        self._logger.debug("Traffic light transition", previous=previous, current=state.name)

    def request(self) -> None:
        """Delegate to the current state. Without a state this does nothing."""
        if self._state is not None:
            self._state.handle(self)

    def emit(self, message: str) -> None:
        self._output.emit(message)
