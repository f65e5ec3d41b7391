"""Search-driven bulk mutation with per-file failure isolation."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Sequence

from obsidian_rest.data_models import BulkOperationFailure, BulkOperationResult, SearchResult

logger = logging.getLogger(__name__)

Search = Callable[[str], Awaitable[Sequence[SearchResult]]]
Mutation = Callable[[str], Awaitable[None]]


async def run_bulk_operation(
    query: str,
    search: Search,
    mutate: Mutation,
    concurrency: int = 1,
) -> BulkOperationResult:
    """Run ``search`` and apply ``mutate`` to every matched file.

    A failing search aborts the whole operation. A failing mutation is
    recorded against its file and never stops the others. Outcomes are
    assembled in search-result order, whatever order the mutations finish in.

    Args:
        query: Search string forwarded to ``search``.
        search: Coroutine returning the matches for ``query``.
        mutate: Coroutine applying the change to one vault path.
        concurrency: Maximum number of mutations in flight (>= 1).

    Returns:
        A :class:`BulkOperationResult` accounting for every match exactly once.

    Raises:
        ValueError: If ``concurrency`` is lower than 1.
    """
    if concurrency < 1:
        raise ValueError("Bulk concurrency must be at least 1.")

    matches = await search(query)
    filenames = [match.path for match in matches]
    limiter = asyncio.Semaphore(concurrency)

    async def _apply(filename: str) -> Optional[str]:
        async with limiter:
            try:
                await mutate(filename)
            except Exception as exc:
                logger.warning("Bulk update of '%s' failed: %s", filename, exc)
                return str(exc) or type(exc).__name__
        return None

    outcomes = await asyncio.gather(*(_apply(filename) for filename in filenames))

    successful: list[str] = []
    failed: list[BulkOperationFailure] = []
    for filename, error in zip(filenames, outcomes):
        if error is None:
            successful.append(filename)
        else:
            failed.append(BulkOperationFailure(filename=filename, error=error))

    logger.info(
        "Bulk operation for query '%s': %s succeeded, %s failed",
        query,
        len(successful),
        len(failed),
    )
    return BulkOperationResult(
        successful=successful,
        failed=failed,
        total_processed=len(filenames),
        query=query,
    )
