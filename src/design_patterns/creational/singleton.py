"""Singleton - one lazily created instance shared by the whole process."""

import threading
from typing import Optional

from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink


# Passed only by get_instance
_creation_token = object()


class Singleton:
    """
    Thread-safe lazily initialised singleton.

    ``get_instance()`` uses double-checked locking: the fast path reads the
    class attribute without a lock, the slow path re-checks under the lock so
    racing threads construct the instance exactly once. Constructing the class
    directly always raises ``RuntimeError``.
    """

    _instance: Optional["Singleton"] = None
    _lock = threading.RLock()
    _construction_count = 0

    def __init__(self, _token: object = None):
        """Use ``get_instance()``."""
        if _token is not _creation_token:
            raise RuntimeError("Singleton cannot be constructed directly, use Singleton.get_instance()")
        with Singleton._lock:
            Singleton._construction_count += 1
        self._logger = get_logger(__name__)
        self._logger.debug("Singleton constructed", construction_count=Singleton._construction_count)

    @classmethod
    def get_instance(cls) -> "Singleton":
        """Get the shared instance, creating it on first access."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_creation_token)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance. Tests use this to isolate process state."""
        with cls._lock:
            cls._instance = None
            cls._construction_count = 0

    @classmethod
    def construction_count(cls) -> int:
        """How many times the instance has been constructed since the last reset."""
        return cls._construction_count

    def do_something(self, output: Optional[OutputSink] = None) -> None:
        """Example operation on the shared instance."""
        resolve_sink(output).emit("Singleton: doing something")
