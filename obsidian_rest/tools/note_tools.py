"""Note management MCP tools.

This module provides MCP tool wrappers for note operations over the REST API:
- Server identity
- Active note retrieve/update/delete/patch
- Vault note retrieve/create-or-update/append/delete/patch

All tools delegate to obsidian_rest.core.repository.VaultRepository.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from obsidian_rest.server import mcp
from obsidian_rest.session import get_repository
from obsidian_rest.data_models import File
from obsidian_rest.models import (
    ServerInfoInput,
    ActiveNoteInput,
    UpdateActiveNoteInput,
    PatchActiveNoteInput,
    GetNoteInput,
    WriteNoteInput,
    DeleteNoteInput,
    PatchNoteInput,
)


# ==============================================================================
# SERVER
# ==============================================================================

@mcp.tool()
async def get_obsidian_server_info(
    input: ServerInfoInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Report which Local REST API the server talks to.

    Returns:
        {
            "service": str,   # e.g. "Obsidian Local REST API"
            "version": str    # plugin version
        }

    Examples:
        - Use when: Checking the connection and API key before other calls

    Error Handling:
        - Plugin unreachable → connection error
        - Invalid API key → "Repository operation failed (401): Unauthorized"
    """
    info = await get_repository().get_server_info()
    return info.as_payload()


# ==============================================================================
# ACTIVE NOTE
# ==============================================================================

@mcp.tool()
async def get_active_obsidian_note(
    input: ActiveNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Retrieve the note currently open in Obsidian.

    Returns:
        {
            "filename": str,  # vault-relative path
            "content": str    # complete markdown content
        }

    Error Handling:
        - No note open → "Repository operation failed (404): Not Found"
    """
    note = await get_repository().get_active_note()
    return note.as_payload()


@mcp.tool()
async def update_active_obsidian_note(
    input: UpdateActiveNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Replace the full content of the active note (destructive).

    Args:
        input (UpdateActiveNoteInput): Validated input containing:
            - content (str): New markdown content

    Returns:
        {"status": "updated"}
    """
    await get_repository().update_active_note(input.content)
    return {"status": "updated"}


@mcp.tool()
async def delete_active_obsidian_note(
    input: ActiveNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Delete the note currently open in Obsidian (destructive).

    Returns:
        {"status": "deleted"}
    """
    await get_repository().delete_active_note()
    return {"status": "deleted"}


@mcp.tool()
async def patch_active_obsidian_note(
    input: PatchActiveNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Insert or replace content at a heading, block, line or frontmatter key
    of the active note.

    Args:
        input (PatchActiveNoteInput): Validated input containing:
            - content (str): Text to insert
            - operation (str): "append" | "prepend" | "replace"
            - target_type (str): "heading" | "frontmatter" | "document" | "block" | "line"
            - target (str): Heading path joined with "::", block id, or key

    Returns:
        {
            "status": "patched",
            "operation": str,
            "target_type": str,
            "target": str
        }

    Examples:
        - Append a task under "Tasks": operation="append", target_type="heading", target="Tasks"
        - Missing targets are created by the API
    """
    parameters = input.to_parameters()
    await get_repository().patch_active_note(input.content, parameters)
    return {
        "status": "patched",
        "operation": parameters.operation.value,
        "target_type": parameters.target_type.value,
        "target": parameters.target,
    }


# ==============================================================================
# VAULT NOTES
# ==============================================================================

@mcp.tool()
async def get_obsidian_note(
    input: GetNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Retrieve complete note content (full markdown) by vault path.

    Can be expensive for large notes. Consider search_obsidian_vault() first
    to find the right file.

    Args:
        input (GetNoteInput): Validated input containing:
            - filename (str): Vault-relative path including extension
                Examples: "Daily Notes/2025-10-26.md"

    Returns:
        {
            "filename": str,
            "content": str
        }

    Error Handling:
        - Note not found → "Repository operation failed (404): Not Found"
    """
    note = await get_repository().get_vault_note(input.filename)
    return note.as_payload()


@mcp.tool()
async def create_or_update_obsidian_note(
    input: WriteNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Create a note, or replace the entire content of an existing one.

    Missing parent folders are created by the API.

    Returns:
        {"filename": str, "status": "written"}
    """
    await get_repository().create_or_update_vault_note(File(input.filename, input.content))
    return {"filename": input.filename, "status": "written"}


@mcp.tool()
async def append_to_obsidian_note(
    input: WriteNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append content to the end of a note, creating the note if missing.

    Returns:
        {"filename": str, "status": "appended"}
    """
    await get_repository().append_to_vault_note(File(input.filename, input.content))
    return {"filename": input.filename, "status": "appended"}


@mcp.tool()
async def delete_obsidian_note(
    input: DeleteNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Delete a note from the vault (destructive).

    Returns:
        {"filename": str, "status": "deleted"}

    Error Handling:
        - Note not found → "Repository operation failed (404): Not Found"
    """
    await get_repository().delete_vault_note(input.filename)
    return {"filename": input.filename, "status": "deleted"}


@mcp.tool()
async def patch_obsidian_note(
    input: PatchNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Insert or replace content at a heading, block, line or frontmatter key
    of a vault note.

    Args:
        input (PatchNoteInput): Validated input containing:
            - filename (str): Vault-relative path
            - content (str): Text to insert
            - operation (str): "append" | "prepend" | "replace"
            - target_type (str): "heading" | "frontmatter" | "document" | "block" | "line"
            - target (str): Heading path joined with "::", block id, or key

    Returns:
        {
            "filename": str,
            "status": "patched",
            "operation": str,
            "target_type": str,
            "target": str
        }
    """
    parameters = input.to_parameters()
    await get_repository().patch_vault_note(File(input.filename, input.content), parameters)
    return {
        "filename": input.filename,
        "status": "patched",
        "operation": parameters.operation.value,
        "target_type": parameters.target_type.value,
        "target": parameters.target,
    }
