"""Depth-bounded expansion of vault directory listings."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from obsidian_rest.constants import MAX_DIRECTORY_DEPTH
from obsidian_rest.core.paths import join_path

logger = logging.getLogger(__name__)

ListDirectory = Callable[[str], Awaitable[list[str]]]


async def walk_directory(
    list_directory: ListDirectory,
    directory: str = "",
    max_depth: int = MAX_DIRECTORY_DEPTH,
) -> list[str]:
    """Recursively expand a directory listing, depth-first and pre-order.

    Each directory entry (suffixed with ``/``) is emitted before its own
    contents. Recursion stops once ``max_depth`` nested levels below
    ``directory`` have been listed, which also bounds malformed or cyclic
    listings.

    Args:
        list_directory: Coroutine returning the raw entries of one directory
            (the empty string is the vault root).
        directory: Where to start; empty for the vault root.
        max_depth: Deepest level that is still expanded.

    Returns:
        Vault-relative paths in listing order.

    Examples:
        Root ``["a.md", "b/"]`` with ``b/`` holding ``["c.md"]`` yields
        ``["a.md", "b/", "b/c.md"]``.
    """
    return await _walk(list_directory, directory, 0, max_depth)


async def _walk(
    list_directory: ListDirectory,
    directory: str,
    current_depth: int,
    max_depth: int,
) -> list[str]:
    entries = await list_directory(directory)
    collected: list[str] = []

    for entry in entries:
        entry_path = join_path(directory, entry)
        collected.append(entry_path)

        if not entry.endswith("/"):
            continue

        if current_depth < max_depth:
            subdirectory = join_path(directory, entry.rstrip("/"))
            collected.extend(
                await _walk(list_directory, subdirectory, current_depth + 1, max_depth)
            )
        else:
            logger.debug("Not expanding '%s': depth limit %s reached", entry_path, max_depth)

    return collected
