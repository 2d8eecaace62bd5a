"""Logging configuration schema."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .base_config import LogDestination, LogFormat, LogLevel


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Minimum level emitted")
    destination: LogDestination = Field(
        LogDestination.STDERR, description="Where diagnostic logs are written"
    )
    format: LogFormat = Field(LogFormat.CONSOLE, description="Renderer for log records")
    file_path: Optional[str] = Field(None, description="Log file path when logging to a file")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(3, description="Number of rotated log files to keep")

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    def requires_file(self) -> bool:
        """Whether the destination writes to a log file."""
        return self.destination in (LogDestination.FILE, LogDestination.BOTH)
