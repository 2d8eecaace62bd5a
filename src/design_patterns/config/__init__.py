"""Configuration package with clean public API.

``ConfigurationManager`` lives in :mod:`design_patterns.config.manager`; it is
not re-exported here because it depends on the logging infrastructure, which
itself reads these schemas.
"""

from .schemas import (
    AppConfig,
    DemoConfig,
    LogDestination,
    LogFormat,
    LoggingConfig,
    LogLevel,
    PatternCategory,
)

__all__ = [
    "AppConfig",
    "DemoConfig",
    "LoggingConfig",
    "LogDestination",
    "LogFormat",
    "LogLevel",
    "PatternCategory",
]
