"""Pydantic input models for periodic note operations.

Periodic notes are addressed by period (daily, weekly, monthly, quarterly,
yearly) and optionally pinned to a calendar date.
"""

from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

Period = Literal["daily", "weekly", "monthly", "quarterly", "yearly"]


class PeriodicNoteInput(BaseModel):
    """Input model for get/delete periodic note tools.

    Omit year, month and day for the current period, or give all three to
    address the note containing that date.

    Examples:
        >>> PeriodicNoteInput(period="daily")
        >>> PeriodicNoteInput(period="weekly", year=2025, month=3, day=7)
    """

    period: Period = Field(description="Which periodic note: daily, weekly, monthly, quarterly or yearly.")
    year: Optional[int] = Field(None, ge=1, le=9999, description="Year, e.g. 2025")
    month: Optional[int] = Field(None, ge=1, le=12, description="Month (1-12)")
    day: Optional[int] = Field(None, ge=1, le=31, description="Day of month (1-31)")

    @model_validator(mode="after")
    def validate_date(self) -> "PeriodicNoteInput":
        """Require all date parts or none, and a real calendar date."""
        parts = (self.year, self.month, self.day)
        if all(part is None for part in parts):
            return self
        if any(part is None for part in parts):
            raise ValueError(
                "Provide year, month and day together, or omit all three "
                "for the current period."
            )
        try:
            date(self.year, self.month, self.day)
        except ValueError as exc:
            raise ValueError(f"Invalid date: {exc}") from exc
        return self

    def date_parts(self) -> dict[str, Optional[int]]:
        return {"year": self.year, "month": self.month, "day": self.day}

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"period": "daily"},
                {"period": "weekly", "year": 2025, "month": 3, "day": 7}
            ]
        }


class PeriodicNoteContentInput(PeriodicNoteInput):
    """Input model for create-or-update and append periodic note tools."""

    content: str = Field(description="Markdown content to write or append.")
