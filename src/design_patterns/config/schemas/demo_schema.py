"""Demo run configuration schema."""
from typing import List

from pydantic import BaseModel, Field, field_validator

from .base_config import PatternCategory


class DemoConfig(BaseModel):
    """Controls which demos run and how their output is framed."""

    categories: List[PatternCategory] = Field(
        default_factory=lambda: list(PatternCategory),
        description="Categories run by default, in order",
    )
    separator: str = Field("-" * 44, description="Line emitted after every demo")
    show_banner: bool = Field(True, description="Emit the per-demo header line")

    @field_validator("categories", mode="before")
    @classmethod
    def split_categories(cls, v):
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            v = [item.strip() for item in v.split(",") if item.strip()]
        if isinstance(v, list):
            v = [item.lower() if isinstance(item, str) else item for item in v]
        return v

    @field_validator("categories")
    @classmethod
    def validate_not_empty(cls, v: List[PatternCategory]) -> List[PatternCategory]:
        """At least one category must be selected."""
        if not v:
            raise ValueError("At least one category must be configured")
        return v
