# src/sift/core/config.py
"""Normalization options for string filters."""

from enum import IntFlag
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrimMode(IntFlag):
    """Which ends of the raw value get whitespace stripped."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    BOTH = LEFT | RIGHT

    def apply(self, value: str) -> str:
        if self & TrimMode.LEFT:
            value = value.lstrip()
        if self & TrimMode.RIGHT:
            value = value.rstrip()
        return value


class FilterOptions(BaseModel):
    """
    Options of a single string filter.

    Accepts `force_case_insensitivity` as an input alias so option mappings
    using the admin filter's key validate unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    trim: TrimMode = TrimMode.BOTH
    allow_empty: bool = False
    force_case_insensitive: bool = Field(
        default=False, alias="force_case_insensitivity"
    )

    @field_validator("trim", mode="before")
    @classmethod
    def _check_trim(cls, value: Any) -> Any:
        # IntFlag would otherwise keep unknown bits such as 4 or 7.
        if isinstance(value, bool):
            raise ValueError("trim must be a TrimMode or 0..3, not a bool")
        if isinstance(value, int) and not 0 <= value <= TrimMode.BOTH:
            raise ValueError(f"trim must be between 0 and 3, got {value}")
        return value
