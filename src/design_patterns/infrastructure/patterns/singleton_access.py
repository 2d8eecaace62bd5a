"""Standard singleton access functions."""

from typing import Any, Optional, Type, TypeVar

from design_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    Uses the SingletonRegistry so that only one instance of each class is
    created and reused for the lifetime of the process.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)


def reset_singletons(singleton_class: Optional[Type[Any]] = None) -> None:
    """Forget registered singletons so tests start from a clean process state."""
    SingletonRegistry.get_instance().reset(singleton_class)
