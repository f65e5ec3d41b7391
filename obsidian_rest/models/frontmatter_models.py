"""Pydantic input models for frontmatter field operations.

This module defines input models for changing a single frontmatter field
through the REST API's PATCH endpoint:
- Set (replace) or append a string value
- Set (replace) or append an array of strings
on either the active note or a specific vault note.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import BaseFileInput, BaseFrontmatterKeyInput


def _validate_values(values: list[str]) -> list[str]:
    cleaned = [value for value in values if value.strip()]
    if not cleaned:
        raise ValueError(
            "Provide at least one non-empty value for the frontmatter array."
        )
    return cleaned


class ActiveFrontmatterStringInput(BaseFrontmatterKeyInput):
    """Input model for the active-note string field tools.

    Examples:
        >>> ActiveFrontmatterStringInput(key="status", value="done")
    """

    value: str = Field(description="String value to set or append.")


class ActiveFrontmatterArrayInput(BaseFrontmatterKeyInput):
    """Input model for the active-note array field tools.

    Examples:
        >>> ActiveFrontmatterArrayInput(key="tags", values=["project", "q4"])
    """

    values: list[str] = Field(
        min_length=1,
        description="Values to set as, or append to, the array field.",
        examples=[["project", "q4"]]
    )

    @field_validator('values')
    @classmethod
    def validate_values(cls, v: list[str]) -> list[str]:
        return _validate_values(v)


class NoteFrontmatterStringInput(BaseFileInput, BaseFrontmatterKeyInput):
    """Input model for the vault-note string field tools.

    Examples:
        >>> NoteFrontmatterStringInput(filename="Plan.md", key="status", value="active")
    """

    value: str = Field(description="String value to set or append.")

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"filename": "Projects/Plan.md", "key": "status", "value": "active"}
            ]
        }


class NoteFrontmatterArrayInput(BaseFileInput, BaseFrontmatterKeyInput):
    """Input model for the vault-note array field tools."""

    values: list[str] = Field(
        min_length=1,
        description="Values to set as, or append to, the array field.",
        examples=[["project", "q4"]]
    )

    @field_validator('values')
    @classmethod
    def validate_values(cls, v: list[str]) -> list[str]:
        return _validate_values(v)

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"filename": "Projects/Plan.md", "key": "tags", "values": ["project", "q4"]}
            ]
        }
