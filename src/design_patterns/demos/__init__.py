"""Demo routines and the registry that runs them."""

import threading
from typing import Optional

from design_patterns.demos.behavioral import register_behavioral_demos
from design_patterns.demos.creational import register_creational_demos
from design_patterns.demos.registry import (
    DemoRegistration,
    DemoRegistry,
    get_demo_registry,
    parse_category,
)
from design_patterns.demos.structural import register_structural_demos

_registration_lock = threading.Lock()


def register_all_demos(registry: Optional[DemoRegistry] = None) -> DemoRegistry:
    """Register every category's demos once and return the registry."""
    registry = registry or get_demo_registry()
    with _registration_lock:
        if not registry.get_demo_names():
            register_creational_demos(registry)
            register_structural_demos(registry)
            register_behavioral_demos(registry)
    return registry


__all__ = [
    "DemoRegistration",
    "DemoRegistry",
    "get_demo_registry",
    "parse_category",
    "register_all_demos",
    "register_creational_demos",
    "register_structural_demos",
    "register_behavioral_demos",
]
