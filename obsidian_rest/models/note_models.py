"""Pydantic input models for note operations.

This module defines input models for note management through the REST API:
- Server information
- Active note retrieve/update/delete/patch
- Vault note retrieve/create-or-update/append/delete/patch
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from obsidian_rest.data_models import PatchOperation, PatchParameters, TargetType

from .base import BaseFileInput


class ServerInfoInput(BaseModel):
    """Input model for get_obsidian_server_info tool.

    Takes no parameters, but using a model maintains API consistency.
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [{}]
        }


class ActiveNoteInput(BaseModel):
    """Input model for tools acting on the active note without a payload.

    Used by get_active_obsidian_note and delete_active_obsidian_note.
    """


class UpdateActiveNoteInput(BaseModel):
    """Input model for update_active_obsidian_note tool.

    Replaces the full content of the note currently open in Obsidian.

    Examples:
        >>> UpdateActiveNoteInput(content="# Today\\n\\n- Review PRs")
    """

    content: str = Field(
        description=(
            "New complete markdown content for the active note. "
            "Can be empty string to clear the note."
        )
    )


class GetNoteInput(BaseFileInput):
    """Input model for get_obsidian_note tool.

    Examples:
        >>> GetNoteInput(filename="Daily Notes/2025-10-27.md")
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"filename": "Daily Notes/2025-10-27.md"},
                {"filename": "Projects/Project Alpha.md"}
            ]
        }


class WriteNoteInput(BaseFileInput):
    """Input model for create_or_update_obsidian_note and append_to_obsidian_note.

    Examples:
        >>> WriteNoteInput(filename="Projects/New Project.md", content="# New Project")
    """

    content: str = Field(
        description=(
            "Markdown content. Replaces the note for create-or-update, "
            "is added at the end for append. Can be empty."
        )
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "filename": "Projects/New Project.md",
                    "content": "# New Project\n\nGoals:\n- Goal 1\n- Goal 2"
                }
            ]
        }


class DeleteNoteInput(BaseFileInput):
    """Input model for delete_obsidian_note tool."""


class _PatchFields(BaseModel):
    content: str = Field(
        description="Markdown (or text) to insert at the target.",
    )

    operation: PatchOperation = Field(
        description="How to combine content with the target: 'append', 'prepend' or 'replace'.",
    )

    target_type: TargetType = Field(
        description=(
            "What the target names: 'heading', 'frontmatter', 'document', "
            "'block' or 'line'."
        ),
    )

    target: str = Field(
        "",
        description=(
            "Target identifier. Nested headings are joined with '::' "
            "(e.g. 'Meetings::Action Items'). May be empty only for 'document'."
        ),
        examples=["Meetings::Action Items", "status", "^block-id"]
    )

    @model_validator(mode="after")
    def validate_target(self) -> "_PatchFields":
        """Require a target unless the whole document is patched."""
        if not self.target.strip() and self.target_type is not TargetType.DOCUMENT:
            raise ValueError(
                f"A target is required for target_type '{self.target_type.value}'. "
                "Only 'document' patches may omit it."
            )
        return self

    def to_parameters(self) -> PatchParameters:
        return PatchParameters(self.operation, self.target_type, self.target)


class PatchActiveNoteInput(_PatchFields):
    """Input model for patch_active_obsidian_note tool.

    Examples:
        >>> PatchActiveNoteInput(content="- follow up", operation="append",
        ...                      target_type="heading", target="Tasks")
    """


class PatchNoteInput(BaseFileInput, _PatchFields):
    """Input model for patch_obsidian_note tool."""

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "filename": "Meetings/Weekly.md",
                    "content": "- Ship release notes",
                    "operation": "append",
                    "target_type": "heading",
                    "target": "Weekly::Action Items"
                }
            ]
        }
