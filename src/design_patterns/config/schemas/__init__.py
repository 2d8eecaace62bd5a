"""Configuration schemas."""

from .app_schema import AppConfig
from .base_config import LogDestination, LogFormat, LogLevel, PatternCategory
from .demo_schema import DemoConfig
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "DemoConfig",
    "LoggingConfig",
    "LogDestination",
    "LogFormat",
    "LogLevel",
    "PatternCategory",
]
