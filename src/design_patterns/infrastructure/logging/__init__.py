"""Structured logging for the catalogue."""

from .logger import get_logger, is_configured, setup_logging

__all__ = ["get_logger", "setup_logging", "is_configured"]
