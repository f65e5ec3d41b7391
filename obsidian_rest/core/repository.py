"""Vault operations on top of the Obsidian Local REST API.

Each public coroutine maps one logical vault action onto one or more HTTP calls:
build the request, execute it, validate the status, decode the payload. The
repository keeps no vault state between calls.

Filenames and directories are passed to the API verbatim, without ``..`` or
absolute-path checks; the API is trusted local infrastructure and confines
paths to its own vault.
"""

from __future__ import annotations

import json
import logging
from typing import Optional, Sequence, TypeVar

from pydantic import BaseModel, TypeAdapter

from obsidian_rest.core.bulk_operations import Mutation, run_bulk_operation
from obsidian_rest.core.directory_walker import walk_directory
from obsidian_rest.core.executor import ApiResponse, HttpExecutor
from obsidian_rest.core.requests import ApiRequest, RequestBuilder
from obsidian_rest.core.responses import (
    DirectoryListingPayload,
    NoteJsonPayload,
    SearchHitPayload,
    ServerInfoPayload,
)
from obsidian_rest.core.validation import validate_response
from obsidian_rest.data_models import (
    BulkOperationResult,
    File,
    PatchOperation,
    PatchParameters,
    SearchResult,
    ServerInformation,
)

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)

_SEARCH_HITS = TypeAdapter(list[SearchHitPayload])


def _json_payload(value: str | Sequence[str]) -> str:
    """Serialize a frontmatter value as the JSON body of a PATCH request."""
    if isinstance(value, str):
        return json.dumps(value)
    return json.dumps(list(value))


class VaultRepository:
    """Orchestrates vault operations through an :class:`HttpExecutor`."""

    def __init__(
        self,
        executor: HttpExecutor,
        request_builder: Optional[RequestBuilder] = None,
        *,
        bulk_concurrency: int = 1,
    ) -> None:
        if bulk_concurrency < 1:
            raise ValueError("Bulk concurrency must be at least 1.")
        self.executor = executor
        self.requests = request_builder or RequestBuilder()
        self.bulk_concurrency = bulk_concurrency

    async def aclose(self) -> None:
        """Release the executor's connections, if it holds any."""
        close = getattr(self.executor, "aclose", None)
        if close is not None:
            await close()

    # ==========================================================================
    # HELPERS
    # ==========================================================================

    async def _send(self, request: ApiRequest) -> ApiResponse:
        response = await self.executor.execute(request)
        validate_response(response)
        return response

    async def _fetch(self, request: ApiRequest, model: type[PayloadT]) -> PayloadT:
        response = await self._send(request)
        return model.model_validate(response.body)

    async def _fetch_note(self, request: ApiRequest) -> File:
        # frontmatter, stat and tags are decoded but not surfaced
        note = await self._fetch(request, NoteJsonPayload)
        return File(filename=note.path, content=note.content)

    # ==========================================================================
    # SERVER
    # ==========================================================================

    async def get_server_info(self) -> ServerInformation:
        """Return the service name and plugin version of the wrapped API."""
        info = await self._fetch(self.requests.server_info(), ServerInfoPayload)
        return ServerInformation(service=info.service, version=info.versions.self_)

    # ==========================================================================
    # ACTIVE NOTE
    # ==========================================================================

    async def get_active_note(self) -> File:
        """Return the note currently open in Obsidian."""
        return await self._fetch_note(self.requests.get_active_note())

    async def update_active_note(self, content: str) -> None:
        await self._send(self.requests.update_active_note(content))
        logger.info("Replaced content of the active note (%s chars)", len(content))

    async def delete_active_note(self) -> None:
        await self._send(self.requests.delete_active_note())
        logger.info("Deleted the active note")

    async def patch_active_note(self, content: str, parameters: PatchParameters) -> None:
        """Apply a targeted edit to the active note."""
        await self._send(self.requests.patch_active_note(content, parameters))
        logger.info(
            "Patched active note (%s %s '%s')",
            parameters.operation.value,
            parameters.target_type.value,
            parameters.target,
        )

    async def _patch_active_frontmatter(
        self,
        key: str,
        value: str | Sequence[str],
        operation: PatchOperation,
    ) -> None:
        request = self.requests.set_active_frontmatter(_json_payload(value), operation, key)
        await self._send(request)
        logger.info("Frontmatter field '%s' of the active note: %s", key, operation.value)

    async def set_active_note_frontmatter_string_field(self, key: str, value: str) -> None:
        await self._patch_active_frontmatter(key, value, PatchOperation.REPLACE)

    async def append_to_active_note_frontmatter_string_field(self, key: str, value: str) -> None:
        await self._patch_active_frontmatter(key, value, PatchOperation.APPEND)

    async def set_active_note_frontmatter_array_field(
        self,
        key: str,
        value: Sequence[str],
    ) -> None:
        await self._patch_active_frontmatter(key, value, PatchOperation.REPLACE)

    async def append_to_active_note_frontmatter_array_field(
        self,
        key: str,
        value: Sequence[str],
    ) -> None:
        await self._patch_active_frontmatter(key, value, PatchOperation.APPEND)

    # ==========================================================================
    # VAULT NOTES
    # ==========================================================================

    async def get_vault_note(self, filename: str) -> File:
        return await self._fetch_note(self.requests.get_vault_note(filename))

    async def create_or_update_vault_note(self, file: File) -> None:
        """Create ``file`` or replace its content entirely."""
        await self._send(self.requests.create_or_update_vault_note(file.filename, file.content))
        logger.info("Wrote vault note '%s'", file.filename)

    async def append_to_vault_note(self, file: File) -> None:
        """Append ``file.content`` to the note, creating it when missing."""
        await self._send(self.requests.append_to_vault_note(file.filename, file.content))
        logger.info("Appended to vault note '%s'", file.filename)

    async def delete_vault_note(self, filename: str) -> None:
        await self._send(self.requests.delete_vault_note(filename))
        logger.info("Deleted vault note '%s'", filename)

    async def patch_vault_note(self, file: File, parameters: PatchParameters) -> None:
        """Apply a targeted edit using ``file.content`` as the patch body."""
        await self._send(self.requests.patch_vault_note(file.filename, file.content, parameters))
        logger.info(
            "Patched vault note '%s' (%s %s '%s')",
            file.filename,
            parameters.operation.value,
            parameters.target_type.value,
            parameters.target,
        )

    async def _patch_vault_frontmatter(
        self,
        filename: str,
        key: str,
        value: str | Sequence[str],
        operation: PatchOperation,
    ) -> None:
        request = self.requests.set_vault_frontmatter(
            filename, _json_payload(value), operation, key
        )
        await self._send(request)
        logger.info("Frontmatter field '%s' of '%s': %s", key, filename, operation.value)

    async def set_vault_note_frontmatter_string_field(
        self,
        filename: str,
        key: str,
        value: str,
    ) -> None:
        await self._patch_vault_frontmatter(filename, key, value, PatchOperation.REPLACE)

    async def append_to_vault_note_frontmatter_string_field(
        self,
        filename: str,
        key: str,
        value: str,
    ) -> None:
        await self._patch_vault_frontmatter(filename, key, value, PatchOperation.APPEND)

    async def set_vault_note_frontmatter_array_field(
        self,
        filename: str,
        key: str,
        value: Sequence[str],
    ) -> None:
        await self._patch_vault_frontmatter(filename, key, value, PatchOperation.REPLACE)

    async def append_to_vault_note_frontmatter_array_field(
        self,
        filename: str,
        key: str,
        value: Sequence[str],
    ) -> None:
        await self._patch_vault_frontmatter(filename, key, value, PatchOperation.APPEND)

    # ==========================================================================
    # DIRECTORY LISTING & SEARCH
    # ==========================================================================

    async def _list_directory_entries(self, directory: str) -> list[str]:
        listing = await self._fetch(
            self.requests.list_vault_directory(directory), DirectoryListingPayload
        )
        return listing.files

    async def list_vault_directory(self, directory: str = "") -> list[str]:
        """List ``directory`` and its subdirectories, two levels deep.

        Returns:
            Vault-relative paths, each directory followed by its contents.
        """
        return await walk_directory(self._list_directory_entries, directory)

    async def search_vault(self, query: str) -> list[SearchResult]:
        """Run a simple text search; results keep the API's order."""
        response = await self._send(self.requests.search_vault(query))
        hits = _SEARCH_HITS.validate_python(response.body)
        return [SearchResult(path=hit.filename, score=hit.score) for hit in hits]

    # ==========================================================================
    # BULK OPERATIONS
    # ==========================================================================

    async def _bulk(self, query: str, mutate: Mutation) -> BulkOperationResult:
        return await run_bulk_operation(
            query,
            self.search_vault,
            mutate,
            concurrency=self.bulk_concurrency,
        )

    async def bulk_apply_tags_from_search(
        self,
        query: str,
        tags: Sequence[str],
    ) -> BulkOperationResult:
        """Append ``tags`` to the ``tags`` field of every note matching ``query``."""

        async def mutate(filename: str) -> None:
            await self.append_to_vault_note_frontmatter_array_field(filename, "tags", tags)

        return await self._bulk(query, mutate)

    async def bulk_replace_frontmatter_string_from_search(
        self,
        query: str,
        key: str,
        value: str,
    ) -> BulkOperationResult:
        async def mutate(filename: str) -> None:
            await self.set_vault_note_frontmatter_string_field(filename, key, value)

        return await self._bulk(query, mutate)

    async def bulk_replace_frontmatter_array_from_search(
        self,
        query: str,
        key: str,
        value: Sequence[str],
    ) -> BulkOperationResult:
        async def mutate(filename: str) -> None:
            await self.set_vault_note_frontmatter_array_field(filename, key, value)

        return await self._bulk(query, mutate)

    async def bulk_append_to_frontmatter_string_from_search(
        self,
        query: str,
        key: str,
        value: str,
    ) -> BulkOperationResult:
        async def mutate(filename: str) -> None:
            await self.append_to_vault_note_frontmatter_string_field(filename, key, value)

        return await self._bulk(query, mutate)

    async def bulk_append_to_frontmatter_array_from_search(
        self,
        query: str,
        key: str,
        value: Sequence[str],
    ) -> BulkOperationResult:
        async def mutate(filename: str) -> None:
            await self.append_to_vault_note_frontmatter_array_field(filename, key, value)

        return await self._bulk(query, mutate)

    # ==========================================================================
    # PERIODIC NOTES
    # ==========================================================================

    async def get_periodic_note(
        self,
        period: str,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> File:
        """Return the current periodic note, or the one for a specific date."""
        return await self._fetch_note(
            self.requests.get_periodic_note(period, year, month, day)
        )

    async def create_or_update_periodic_note(
        self,
        period: str,
        content: str,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> None:
        request = self.requests.create_or_update_periodic_note(period, content, year, month, day)
        await self._send(request)
        logger.info("Wrote %s periodic note %s", period, request.path)

    async def append_to_periodic_note(
        self,
        period: str,
        content: str,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> None:
        request = self.requests.append_to_periodic_note(period, content, year, month, day)
        await self._send(request)
        logger.info("Appended to %s periodic note %s", period, request.path)

    async def delete_periodic_note(
        self,
        period: str,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> None:
        request = self.requests.delete_periodic_note(period, year, month, day)
        await self._send(request)
        logger.info("Deleted %s periodic note %s", period, request.path)
