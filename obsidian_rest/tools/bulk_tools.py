"""Search-driven bulk MCP tools.

Each tool searches the vault and applies one frontmatter change to every
matching note. A failure on one note never stops the others; the result
lists successes and failures separately.

All tools delegate to obsidian_rest.core.repository.VaultRepository.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from obsidian_rest.server import mcp
from obsidian_rest.session import get_repository
from obsidian_rest.models import (
    BulkApplyTagsInput,
    BulkFrontmatterStringInput,
    BulkFrontmatterArrayInput,
)


@mcp.tool()
async def bulk_apply_tags_from_search(
    input: BulkApplyTagsInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append tags to every note matching a search query.

    Args:
        input (BulkApplyTagsInput): Validated input containing:
            - query (str): Search selecting the notes
            - tags (list[str]): Tags to append (leading '#' is stripped)

    Returns:
        {
            "query": str,
            "successful": list[str],
            "failed": [{"filename": str, "error": str}, ...],
            "total_processed": int
        }

    Examples:
        - Use when: Tagging every meeting note (query="meeting", tags=["meetings"])
        - No matches → empty lists and total_processed == 0

    Error Handling:
        - Search itself fails → error, nothing is changed
        - Individual note fails → listed under "failed", others continue
    """
    result = await get_repository().bulk_apply_tags_from_search(input.query, input.tags)
    return result.as_payload()


@mcp.tool()
async def bulk_replace_frontmatter_string(
    input: BulkFrontmatterStringInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Set a frontmatter field to a string on every note matching a query.

    Returns:
        Same shape as bulk_apply_tags_from_search().
    """
    result = await get_repository().bulk_replace_frontmatter_string_from_search(
        input.query, input.key, input.value
    )
    return result.as_payload()


@mcp.tool()
async def bulk_replace_frontmatter_array(
    input: BulkFrontmatterArrayInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Replace a frontmatter field with a list on every note matching a query."""
    result = await get_repository().bulk_replace_frontmatter_array_from_search(
        input.query, input.key, input.values
    )
    return result.as_payload()


@mcp.tool()
async def bulk_append_frontmatter_string(
    input: BulkFrontmatterStringInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append a string to a frontmatter field on every note matching a query."""
    result = await get_repository().bulk_append_to_frontmatter_string_from_search(
        input.query, input.key, input.value
    )
    return result.as_payload()


@mcp.tool()
async def bulk_append_frontmatter_array(
    input: BulkFrontmatterArrayInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append strings to a list field on every note matching a query."""
    result = await get_repository().bulk_append_to_frontmatter_array_from_search(
        input.query, input.key, input.values
    )
    return result.as_payload()
