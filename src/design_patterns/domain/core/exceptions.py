# src/design_patterns/domain/core/exceptions.py
from typing import List, Optional


class DomainException(Exception):
    """Base exception for all catalogue errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, invalid_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.invalid_fields = invalid_fields or []


class DemoNotFoundError(DomainException):
    """Raised when a requested demo routine is not registered."""
    def __init__(self, demo_name: str, available: Optional[List[str]] = None):
        super().__init__(f"Demo '{demo_name}' is not registered")
        self.demo_name = demo_name
        self.available = available or []


class CategoryNotFoundError(DomainException):
    """Raised when a requested pattern category does not exist."""
    def __init__(self, category: str, available: Optional[List[str]] = None):
        super().__init__(
            f"Unknown category '{category}'. Available: {', '.join(available or [])}"
        )
        self.category = category
        self.available = available or []


class OutputError(DomainException):
    """Raised when demo output cannot be written to its destination."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot write demo output to {path}: {reason}")
        self.path = path
