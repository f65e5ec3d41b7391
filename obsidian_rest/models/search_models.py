"""Pydantic input models for search and directory listing.

This module defines input models for discovery tools:
- Simple full-text search across the vault
- Recursive directory listing
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class SearchVaultInput(BaseModel):
    """Input model for search_obsidian_vault tool.

    Examples:
        >>> SearchVaultInput(query="meeting")
    """

    query: str = Field(
        min_length=1,
        description=(
            "Text to search for across all notes. "
            "Examples: 'meeting', 'project alpha', 'TODO'"
        )
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate search query is not empty."""
        if not v.strip():
            raise ValueError(
                "Search query cannot be empty. "
                "Provide a search term to find notes."
            )
        return v.strip()

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"query": "meeting"},
                {"query": "project alpha"}
            ]
        }


class ListDirectoryInput(BaseModel):
    """Input model for list_obsidian_directory tool.

    Examples:
        >>> ListDirectoryInput()
        >>> ListDirectoryInput(directory="Projects")
    """

    directory: str = Field(
        "",
        description=(
            "Vault-relative directory to list. Omit or leave empty for the vault root. "
            "Subdirectories are expanded up to two levels deep."
        ),
        examples=["", "Projects", "Daily Notes"]
    )

    @field_validator('directory')
    @classmethod
    def validate_directory(cls, v: str) -> str:
        """Strip whitespace and surrounding slashes."""
        return v.strip().strip("/")
