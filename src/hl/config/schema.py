"""Pydantic models for configuration schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Config(BaseModel):
    """Root configuration object."""

    bindings: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Color name -> regex patterns painted in that color",
    )
    ignore_case: bool = Field(default=False, description="Match patterns case-insensitively")
    color: bool = Field(default=True, description="Emit ANSI escape sequences")

    @field_validator("bindings", mode="before")
    @classmethod
    def parse_bindings(cls, v: dict[str, Any] | None) -> dict[str, list[str]]:
        """Accept a single pattern string in place of a list."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        result = {}
        for color, patterns in v.items():
            if patterns is None:
                result[color] = []
            elif isinstance(patterns, str):
                result[color] = [patterns]
            else:
                result[color] = patterns
        return result

    def binding_pairs(self) -> list[tuple[str, str]]:
        """Flatten bindings to (color, pattern) pairs in file order."""
        return [(color, pattern) for color, patterns in self.bindings.items() for pattern in patterns]
