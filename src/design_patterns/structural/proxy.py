"""Proxy - access control and lazy creation in front of a real service."""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink


class Service(ABC):
    @abstractmethod
    def perform_action(self) -> bool:
        pass


class RealService(Service):
    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    def perform_action(self) -> bool:
        self._output.emit("Action performed!")
        return True


class ServiceProxy(Service):
    """Denies callers without access and creates the real service on first permitted use."""

    def __init__(self, has_access: bool, output: Optional[OutputSink] = None):
        self.has_access = has_access
        self._output = output
        self._real: Optional[RealService] = None
        self._logger = get_logger(__name__)

    @property
    def is_initialized(self) -> bool:
        """Whether the real service has been created yet."""
        return self._real is not None

    def perform_action(self) -> bool:
        if not self.has_access:
            self._logger.info("Proxy denied access to real service")
            resolve_sink(self._output).emit("Access denied.")
            return False
        if self._real is None:
            self._real = RealService(self._output)
        return self._real.perform_action()
