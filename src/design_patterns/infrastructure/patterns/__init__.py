"""Infrastructure patterns package."""

from design_patterns.infrastructure.patterns.singleton_access import get_singleton, reset_singletons
from design_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry", "get_singleton", "reset_singletons"]
