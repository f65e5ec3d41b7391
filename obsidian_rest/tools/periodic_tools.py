"""Periodic note MCP tools.

This module provides MCP tool wrappers for the daily, weekly, monthly,
quarterly and yearly notes managed by Obsidian's periodic notes plugins.
Omit the date to address the current period.

All tools delegate to obsidian_rest.core.repository.VaultRepository.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from obsidian_rest.server import mcp
from obsidian_rest.session import get_repository
from obsidian_rest.models import PeriodicNoteInput, PeriodicNoteContentInput


def _describe(input: PeriodicNoteInput, status: str) -> dict[str, Any]:
    return {"period": input.period, **input.date_parts(), "status": status}


@mcp.tool()
async def get_periodic_note(
    input: PeriodicNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Retrieve a periodic note.

    Args:
        input (PeriodicNoteInput): Validated input containing:
            - period (str): "daily" | "weekly" | "monthly" | "quarterly" | "yearly"
            - year, month, day (int, optional): All three, or none for today

    Returns:
        {
            "period": str,
            "filename": str,
            "content": str
        }

    Error Handling:
        - Note does not exist → "Repository operation failed (404): Not Found"
        - Only some of year/month/day given → ValidationError
    """
    note = await get_repository().get_periodic_note(input.period, **input.date_parts())
    return {"period": input.period, **note.as_payload()}


@mcp.tool()
async def create_or_update_periodic_note(
    input: PeriodicNoteContentInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Replace the content of a periodic note, creating it when missing.

    Returns:
        {"period": str, "year": int | None, "month": int | None,
         "day": int | None, "status": "written"}
    """
    await get_repository().create_or_update_periodic_note(
        input.period, input.content, **input.date_parts()
    )
    return _describe(input, "written")


@mcp.tool()
async def append_to_periodic_note(
    input: PeriodicNoteContentInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Append content to a periodic note, creating it when missing.

    Examples:
        - Use when: Logging an entry in today's daily note (period="daily")
    """
    await get_repository().append_to_periodic_note(
        input.period, input.content, **input.date_parts()
    )
    return _describe(input, "appended")


@mcp.tool()
async def delete_periodic_note(
    input: PeriodicNoteInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Delete a periodic note (destructive)."""
    await get_repository().delete_periodic_note(input.period, **input.date_parts())
    return _describe(input, "deleted")
