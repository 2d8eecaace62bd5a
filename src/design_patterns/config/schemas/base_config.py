"""Shared enumerations for configuration schemas."""
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    STDERR = "stderr"
    STDOUT = "stdout"
    FILE = "file"
    BOTH = "both"


class LogFormat(str, Enum):
    """Log renderer enumeration."""
    CONSOLE = "console"
    JSON = "json"


class PatternCategory(str, Enum):
    """GoF pattern categories, in catalogue order."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
