"""Pydantic input models for MCP tool validation.

Each model represents the input schema for one or more tools, with
field-level validation and descriptive error messages. Validation happens
before any request reaches the Local REST API.

Architecture:
- base: Base models (BaseFileInput, BaseFrontmatterKeyInput) for common validation
- note_models: Server info, active note and vault note operations
- frontmatter_models: Single frontmatter field set/append operations
- search_models: Search and directory listing
- bulk_models: Search-driven bulk frontmatter operations
- periodic_models: Daily/weekly/monthly/quarterly/yearly notes

Usage:
    from obsidian_rest.models import GetNoteInput, PatchNoteInput
    from obsidian_rest.models import SearchVaultInput, BulkApplyTagsInput
"""

from .base import BaseFileInput, BaseFrontmatterKeyInput
from .note_models import (
    ServerInfoInput,
    ActiveNoteInput,
    UpdateActiveNoteInput,
    PatchActiveNoteInput,
    GetNoteInput,
    WriteNoteInput,
    DeleteNoteInput,
    PatchNoteInput,
)
from .frontmatter_models import (
    ActiveFrontmatterStringInput,
    ActiveFrontmatterArrayInput,
    NoteFrontmatterStringInput,
    NoteFrontmatterArrayInput,
)
from .search_models import (
    SearchVaultInput,
    ListDirectoryInput,
)
from .bulk_models import (
    BulkApplyTagsInput,
    BulkFrontmatterStringInput,
    BulkFrontmatterArrayInput,
)
from .periodic_models import (
    Period,
    PeriodicNoteInput,
    PeriodicNoteContentInput,
)

__all__ = [
    # Base models
    "BaseFileInput",
    "BaseFrontmatterKeyInput",
    # Note models
    "ServerInfoInput",
    "ActiveNoteInput",
    "UpdateActiveNoteInput",
    "PatchActiveNoteInput",
    "GetNoteInput",
    "WriteNoteInput",
    "DeleteNoteInput",
    "PatchNoteInput",
    # Frontmatter models
    "ActiveFrontmatterStringInput",
    "ActiveFrontmatterArrayInput",
    "NoteFrontmatterStringInput",
    "NoteFrontmatterArrayInput",
    # Search models
    "SearchVaultInput",
    "ListDirectoryInput",
    # Bulk models
    "BulkApplyTagsInput",
    "BulkFrontmatterStringInput",
    "BulkFrontmatterArrayInput",
    # Periodic models
    "Period",
    "PeriodicNoteInput",
    "PeriodicNoteContentInput",
]
