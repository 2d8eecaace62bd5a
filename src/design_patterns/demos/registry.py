"""Demo Registry - registry pattern mapping demo names to their routines.

Category modules register their demo routines here; the CLI and the default
entry point only ever talk to the registry, never to the routines directly.
"""

import threading
from typing import Callable, Dict, List, Optional

from design_patterns.config.schemas.base_config import PatternCategory
from design_patterns.config.schemas.demo_schema import DemoConfig
from design_patterns.domain.core.exceptions import CategoryNotFoundError, DemoNotFoundError
from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink

DemoRoutine = Callable[[OutputSink], None]


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self, name: str, category: PatternCategory, title: str, routine: DemoRoutine):
        """
        Initialize demo registration.

        Args:
            name: Identifier used on the command line (e.g. 'factory_method')
            category: GoF category the pattern belongs to
            title: Human readable pattern name (e.g. 'Factory Method')
            routine: Callable that drives the pattern and emits its output
        """
        self.name = name
        self.category = category
        self.title = title
        self.routine = routine

    @property
    def header(self) -> str:
        return f"Design Patterns - {self.category.value.capitalize()}: {self.title} demo"

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "category": self.category.value, "title": self.title}


class DemoRegistry:
    """
    Registry of demo routines, kept in registration order.

    Thread-safe singleton implementation.
    """

    _instance: Optional["DemoRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize demo registry."""
        self._registrations: Dict[str, DemoRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "DemoRegistry":
        """Get singleton instance of demo registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton. Used primarily for testing."""
        with cls._lock:
            cls._instance = None

    def register_demo(
        self, name: str, category: PatternCategory, title: str, routine: DemoRoutine
    ) -> None:
        """
        Register a demo routine.

        Raises:
            ValueError: If a demo with the same name is already registered
        """
        with self._registration_lock:
            if name in self._registrations:
                raise ValueError(f"Demo '{name}' is already registered")
            self._registrations[name] = DemoRegistration(name, category, title, routine)
            self._logger.debug("Registered demo", demo=name, category=category.value)

    def is_demo_registered(self, name: str) -> bool:
        return name in self._registrations

    def get_registration(self, name: str) -> DemoRegistration:
        """
        Get registration for a demo.

        Raises:
            DemoNotFoundError: If no demo is registered under ``name``
        """
        registration = self._registrations.get(name)
        if registration is None:
            raise DemoNotFoundError(name, self.get_demo_names())
        return registration

    def get_demo_names(self, category: Optional[PatternCategory] = None) -> List[str]:
        """Registered demo names, optionally restricted to one category."""
        return [
            registration.name
            for registration in self._registrations.values()
            if category is None or registration.category == category
        ]

    def get_registrations(self) -> List[DemoRegistration]:
        return list(self._registrations.values())

    def clear_registrations(self) -> None:
        """Clear all demo registrations. Used primarily for testing."""
        with self._registration_lock:
            self._registrations.clear()

    def run_demo(
        self,
        name: str,
        output: Optional[OutputSink] = None,
        config: Optional[DemoConfig] = None,
    ) -> None:
        """Run one demo, framed by its header and the separator line."""
        registration = self.get_registration(name)
        sink = resolve_sink(output)
        config = config or DemoConfig()

        self._logger.info("Running demo", demo=name, category=registration.category.value)
        if config.show_banner:
            sink.emit(registration.header)
        registration.routine(sink)
        sink.emit(config.separator)

    def run_category(
        self,
        category: PatternCategory,
        output: Optional[OutputSink] = None,
        config: Optional[DemoConfig] = None,
    ) -> List[str]:
        """Run every demo of a category in registration order and return their names."""
        names = self.get_demo_names(category)
        for name in names:
            self.run_demo(name, output, config)
        return names

    def run_all(
        self,
        output: Optional[OutputSink] = None,
        config: Optional[DemoConfig] = None,
    ) -> List[str]:
        """Run the configured categories in order and return the demo names that ran."""
        config = config or DemoConfig()
        executed: List[str] = []
        for category in config.categories:
            executed.extend(self.run_category(category, output, config))
        return executed


def parse_category(value: str) -> PatternCategory:
    """
    Resolve a category name, case-insensitively.

    Raises:
        CategoryNotFoundError: If the name is not a known category
    """
    try:
        return PatternCategory(value.strip().lower())
    except ValueError as e:
        raise CategoryNotFoundError(value, [c.value for c in PatternCategory]) from e


def get_demo_registry() -> DemoRegistry:
    """Get the global demo registry instance."""
    return DemoRegistry.get_instance()
