"""Registry that owns one instance per class for the whole process."""

import threading
from typing import Any, Dict, List, Optional, Type, TypeVar, cast

from design_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Process-wide registry of singleton instances keyed by class.

    Instances are created lazily on first request. Creation is guarded by
    double-checked locking so concurrent first access constructs each class
    exactly once. The registry itself is a singleton reached through
    ``get_instance()``.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize an empty registry."""
        self._instances: Dict[Type[Any], Any] = {}
        self._registry_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it on first access.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, only used when creating the instance
            **kwargs: Constructor keyword arguments, only used when creating the instance

        Returns:
            The shared instance
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._registry_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    self._logger.debug("Created singleton instance of %s", singleton_class.__name__)
        return cast(T, instance)

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register an existing instance, replacing any previous one."""
        with self._registry_lock:
            self._instances[singleton_class] = instance
        self._logger.debug("Registered singleton instance of %s", singleton_class.__name__)

    def has(self, singleton_class: Type[Any]) -> bool:
        """Check whether an instance exists for the class."""
        return singleton_class in self._instances

    def registered_classes(self) -> List[Type[Any]]:
        """Classes that currently have an instance."""
        with self._registry_lock:
            return list(self._instances)

    def reset(self, singleton_class: Optional[Type[Any]] = None) -> None:
        """Drop one instance, or all instances when no class is given."""
        with self._registry_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
