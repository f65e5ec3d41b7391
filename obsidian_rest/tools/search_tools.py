"""Search and discovery MCP tools.

This module provides MCP tool wrappers for:
- Simple full-text search across the vault
- Recursive directory listing (two levels deep)

All tools delegate to obsidian_rest.core.repository.VaultRepository.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from obsidian_rest.server import mcp
from obsidian_rest.session import get_repository
from obsidian_rest.models import SearchVaultInput, ListDirectoryInput


@mcp.tool()
async def search_obsidian_vault(
    input: SearchVaultInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Search note contents across the vault.

    Results keep the order returned by the Local REST API. Scores are the
    API's raw relevance values and are not normalized.

    Args:
        input (SearchVaultInput): Validated input containing:
            - query (str): Search term

    Returns:
        {
            "query": str,
            "results": [{"path": str, "score": float}, ...],
            "total_results": int
        }

    Examples:
        - Use when: Finding notes before reading or editing them
        - Follow-up: get_obsidian_note() with a result path
    """
    results = await get_repository().search_vault(input.query)
    return {
        "query": input.query,
        "results": [result.as_payload() for result in results],
        "total_results": len(results),
    }


@mcp.tool()
async def list_obsidian_directory(
    input: ListDirectoryInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """List files and folders in a vault directory.

    Subdirectories are expanded up to two levels below the requested
    directory; deeper folders appear as entries ending with "/".

    Args:
        input (ListDirectoryInput): Validated input containing:
            - directory (str, optional): Directory to list (omit for vault root)

    Returns:
        {
            "directory": str,
            "entries": list[str],   # vault-relative, directories end with "/"
            "total": int
        }
    """
    entries = await get_repository().list_vault_directory(input.directory)
    return {
        "directory": input.directory,
        "entries": entries,
        "total": len(entries),
    }
