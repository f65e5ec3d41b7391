"""Base Pydantic models for MCP tool input validation.

This module defines base models that provide common validation patterns
for note and frontmatter operations. Other input models inherit from these bases.

Base Models:
- BaseFileInput: Common validation for operations addressing one vault file
- BaseFrontmatterKeyInput: Validation for a frontmatter field name
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class BaseFileInput(BaseModel):
    """Base model for operations on a single vault file.

    Filenames are vault-relative paths including the extension. They are
    forwarded to the Local REST API as given (apart from surrounding
    whitespace); the API confines paths to its own vault.
    """

    filename: str = Field(
        min_length=1,
        description=(
            "Vault-relative path of the note, including extension. "
            "Examples: 'Daily Notes/2025-10-27.md', 'Projects/New Project.md'. "
            "Forward slashes for folders, case-sensitive."
        ),
        examples=["Daily Notes/2025-10-27.md", "Projects/New Project.md", "README.md"]
    )

    @field_validator('filename')
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Strip surrounding whitespace and reject empty filenames.

        Args:
            v: The filename to validate

        Returns:
            The stripped filename

        Raises:
            ValueError: If the filename is empty or only whitespace
        """
        cleaned = v.strip()
        if not cleaned:
            raise ValueError(
                "Filename cannot be empty. "
                "Provide a vault-relative path like 'Projects/Plan.md'."
            )
        return cleaned


class BaseFrontmatterKeyInput(BaseModel):
    """Base model for operations addressing one frontmatter field."""

    key: str = Field(
        min_length=1,
        description="Frontmatter field name. Examples: 'status', 'tags', 'author'.",
        examples=["status", "tags", "author"]
    )

    @field_validator('key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate the frontmatter key is not blank."""
        cleaned = v.strip()
        if not cleaned:
            raise ValueError(
                "Frontmatter key cannot be empty. "
                "Provide the field name you want to change, e.g. 'status'."
            )
        return cleaned
