"""Core domain definitions."""

from .exceptions import (
    CategoryNotFoundError,
    ConfigurationError,
    DemoNotFoundError,
    DomainException,
    OutputError,
)

__all__ = [
    "DomainException",
    "ConfigurationError",
    "DemoNotFoundError",
    "CategoryNotFoundError",
    "OutputError",
]
