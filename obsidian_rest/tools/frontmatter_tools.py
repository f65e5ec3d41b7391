"""Frontmatter field MCP tools.

This module provides MCP tool wrappers that change one frontmatter field
through the REST API's PATCH endpoint. The API creates the field when it
does not exist yet.

All tools delegate to obsidian_rest.core.repository.VaultRepository.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from obsidian_rest.server import mcp
from obsidian_rest.session import get_repository
from obsidian_rest.models import (
    ActiveFrontmatterStringInput,
    ActiveFrontmatterArrayInput,
    NoteFrontmatterStringInput,
    NoteFrontmatterArrayInput,
)


def _result(key: str, value: Any, status: str, filename: str | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"key": key, "value": value, "status": status}
    if filename is not None:
        payload["filename"] = filename
    return payload


# ==============================================================================
# ACTIVE NOTE
# ==============================================================================

@mcp.tool()
async def set_active_note_frontmatter_string(
    input: ActiveFrontmatterStringInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Set a frontmatter field of the active note to a string value.

    Returns:
        {"key": str, "value": str, "status": "replaced"}
    """
    await get_repository().set_active_note_frontmatter_string_field(input.key, input.value)
    return _result(input.key, input.value, "replaced")


@mcp.tool()
async def append_active_note_frontmatter_string(
    input: ActiveFrontmatterStringInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append a string value to a frontmatter field of the active note.

    Returns:
        {"key": str, "value": str, "status": "appended"}
    """
    await get_repository().append_to_active_note_frontmatter_string_field(input.key, input.value)
    return _result(input.key, input.value, "appended")


@mcp.tool()
async def set_active_note_frontmatter_array(
    input: ActiveFrontmatterArrayInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Replace a frontmatter field of the active note with a list of strings.

    Returns:
        {"key": str, "value": list[str], "status": "replaced"}
    """
    await get_repository().set_active_note_frontmatter_array_field(input.key, input.values)
    return _result(input.key, input.values, "replaced")


@mcp.tool()
async def append_active_note_frontmatter_array(
    input: ActiveFrontmatterArrayInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append strings to a list field of the active note's frontmatter.

    Returns:
        {"key": str, "value": list[str], "status": "appended"}
    """
    await get_repository().append_to_active_note_frontmatter_array_field(input.key, input.values)
    return _result(input.key, input.values, "appended")


# ==============================================================================
# VAULT NOTES
# ==============================================================================

@mcp.tool()
async def set_obsidian_frontmatter_string(
    input: NoteFrontmatterStringInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Set a frontmatter field of a vault note to a string value.

    Args:
        input (NoteFrontmatterStringInput): Validated input containing:
            - filename (str): Vault-relative path
            - key (str): Frontmatter field name
            - value (str): New value

    Returns:
        {"filename": str, "key": str, "value": str, "status": "replaced"}

    Examples:
        - Use when: Marking a project note done (key="status", value="done")
    """
    await get_repository().set_vault_note_frontmatter_string_field(
        input.filename, input.key, input.value
    )
    return _result(input.key, input.value, "replaced", input.filename)


@mcp.tool()
async def append_obsidian_frontmatter_string(
    input: NoteFrontmatterStringInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append a string value to a frontmatter field of a vault note.

    Returns:
        {"filename": str, "key": str, "value": str, "status": "appended"}
    """
    await get_repository().append_to_vault_note_frontmatter_string_field(
        input.filename, input.key, input.value
    )
    return _result(input.key, input.value, "appended", input.filename)


@mcp.tool()
async def set_obsidian_frontmatter_array(
    input: NoteFrontmatterArrayInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Replace a frontmatter field of a vault note with a list of strings.

    Returns:
        {"filename": str, "key": str, "value": list[str], "status": "replaced"}
    """
    await get_repository().set_vault_note_frontmatter_array_field(
        input.filename, input.key, input.values
    )
    return _result(input.key, input.values, "replaced", input.filename)


@mcp.tool()
async def append_obsidian_frontmatter_array(
    input: NoteFrontmatterArrayInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append strings to a list field of a vault note's frontmatter.

    Examples:
        - Use when: Adding tags to one note (key="tags", values=["project"])
        - For many notes at once, use bulk_apply_tags_from_search()

    Returns:
        {"filename": str, "key": str, "value": list[str], "status": "appended"}
    """
    await get_repository().append_to_vault_note_frontmatter_array_field(
        input.filename, input.key, input.values
    )
    return _result(input.key, input.values, "appended", input.filename)
