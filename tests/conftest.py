import os

import pytest

from design_patterns.creational.singleton import Singleton
from design_patterns.demos.registry import DemoRegistry
from design_patterns.infrastructure.logging import setup_logging
from design_patterns.infrastructure.output import RecordingSink
from design_patterns.infrastructure.patterns import reset_singletons

_ENV_VARS = (
    "DESIGN_PATTERNS_CONFIG",
    "DESIGN_PATTERNS_LOG_LEVEL",
    "DESIGN_PATTERNS_LOG_DESTINATION",
    "DESIGN_PATTERNS_LOG_FORMAT",
    "DESIGN_PATTERNS_LOG_FILE",
    "DESIGN_PATTERNS_CATEGORIES",
)


@pytest.fixture(autouse=True)
def isolated_process_state(monkeypatch):
    """Singletons and DESIGN_PATTERNS_* variables are process wide; isolate every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    Singleton.reset_instance()
    DemoRegistry.reset_instance()
    reset_singletons()
    yield
    Singleton.reset_instance()
    DemoRegistry.reset_instance()
    reset_singletons()
    # CLI runs reconfigure logging against captured streams
    setup_logging()


@pytest.fixture
def sink():
    """Sink capturing every emitted line."""
    return RecordingSink()
