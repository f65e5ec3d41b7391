"""Pydantic input models for search-driven bulk operations.

Each bulk tool runs a vault search and applies one frontmatter change to
every matching note.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .base import BaseFrontmatterKeyInput
from .frontmatter_models import _validate_values


class _BulkQuery(BaseModel):
    query: str = Field(
        min_length=1,
        description="Search query selecting the notes to change.",
        examples=["meeting", "project alpha"]
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        if not v.strip():
            raise ValueError(
                "Search query cannot be empty. "
                "A bulk operation needs a query to select notes."
            )
        return v.strip()


class BulkApplyTagsInput(_BulkQuery):
    """Input model for bulk_apply_tags_from_search tool.

    Examples:
        >>> BulkApplyTagsInput(query="meeting", tags=["meetings", "2025"])
    """

    tags: list[str] = Field(
        min_length=1,
        description="Tags to append to the 'tags' field of every match.",
        examples=[["meetings", "2025"]]
    )

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Strip whitespace and leading '#' markers; drop empty tags."""
        cleaned = [tag.strip().lstrip("#").strip() for tag in v]
        cleaned = [tag for tag in cleaned if tag]
        if not cleaned:
            raise ValueError("Must specify at least one non-empty tag.")
        return cleaned


class BulkFrontmatterStringInput(_BulkQuery, BaseFrontmatterKeyInput):
    """Input model for the bulk string-field tools."""

    value: str = Field(description="String value to set or append on every match.")


class BulkFrontmatterArrayInput(_BulkQuery, BaseFrontmatterKeyInput):
    """Input model for the bulk array-field tools."""

    values: list[str] = Field(
        min_length=1,
        description="Values to set as, or append to, the array field on every match.",
    )

    @field_validator('values')
    @classmethod
    def validate_values(cls, v: list[str]) -> list[str]:
        return _validate_values(v)
