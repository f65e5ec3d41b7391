"""Request construction for the Obsidian Local REST API.

Every method here is pure: it maps a logical vault operation to the method,
path, headers, body and query parameters the API expects. Nothing is sent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional
from urllib.parse import quote

from obsidian_rest.constants import (
    ACTIVE_MARKDOWN_MEDIA_TYPE,
    ACTIVE_PATH,
    JSON_MEDIA_TYPE,
    MARKDOWN_MEDIA_TYPE,
    NOTE_JSON_MEDIA_TYPE,
    SEARCH_CONTEXT_LENGTH,
    SEARCH_PATH,
    TARGET_DELIMITER,
    TARGET_SAFE_CHARACTERS,
)
from obsidian_rest.core.paths import periodic_path, vault_directory_path, vault_file_path
from obsidian_rest.data_models import PatchOperation, PatchParameters, TargetType


@dataclass(frozen=True)
class ApiRequest:
    """Wire-level description of one HTTP call."""

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None
    params: Mapping[str, str] = field(default_factory=dict)


def encode_target(target: str) -> str:
    """Percent-encode a patch target for the ``Target`` header.

    Unreserved characters and the ``::`` heading delimiter pass through;
    spaces, ``&``, ``=``, ``+`` and non-ASCII text are escaped.

    Examples:
        >>> encode_target("Meeting Notes & Actions")
        'Meeting%20Notes%20%26%20Actions'
        >>> encode_target("status")
        'status'
    """
    try:
        return quote(target, safe=TARGET_SAFE_CHARACTERS)
    except UnicodeEncodeError:
        # Lone surrogates cannot be UTF-8 encoded; send the raw text.
        return target


def _require_filename(filename: str) -> str:
    if not filename or not filename.strip():
        raise ValueError("Filename cannot be empty for a write operation.")
    return filename


def _markdown(content: str) -> bytes:
    return content.encode("utf-8")


class RequestBuilder:
    """Builds :class:`ApiRequest` objects for each logical operation."""

    # --------------------------------------------------------------------------
    # Server
    # --------------------------------------------------------------------------

    def server_info(self) -> ApiRequest:
        return ApiRequest(method="GET", path="/")

    # --------------------------------------------------------------------------
    # Active note
    # --------------------------------------------------------------------------

    def get_active_note(self) -> ApiRequest:
        return ApiRequest(
            method="GET",
            path=ACTIVE_PATH,
            headers={"Accept": NOTE_JSON_MEDIA_TYPE},
        )

    def update_active_note(self, content: str) -> ApiRequest:
        return ApiRequest(
            method="PUT",
            path=ACTIVE_PATH,
            headers={"Content-Type": ACTIVE_MARKDOWN_MEDIA_TYPE},
            content=_markdown(content),
        )

    def delete_active_note(self) -> ApiRequest:
        return ApiRequest(method="DELETE", path=ACTIVE_PATH)

    def patch_active_note(self, content: str, parameters: PatchParameters) -> ApiRequest:
        return ApiRequest(
            method="PATCH",
            path=ACTIVE_PATH,
            headers=self.patch_headers(parameters, ACTIVE_MARKDOWN_MEDIA_TYPE),
            content=_markdown(content),
        )

    def set_active_frontmatter(
        self,
        payload: str,
        operation: PatchOperation,
        key: str,
    ) -> ApiRequest:
        """Build a frontmatter field patch for the active note.

        Args:
            payload: JSON document holding the new value.
            operation: ``replace`` or ``append``.
            key: Frontmatter field name.
        """
        parameters = PatchParameters(operation, TargetType.FRONTMATTER, key)
        return ApiRequest(
            method="PATCH",
            path=ACTIVE_PATH,
            headers=self.patch_headers(parameters, JSON_MEDIA_TYPE),
            content=payload.encode("utf-8"),
        )

    # --------------------------------------------------------------------------
    # Vault notes
    # --------------------------------------------------------------------------

    def get_vault_note(self, filename: str) -> ApiRequest:
        return ApiRequest(
            method="GET",
            path=vault_file_path(filename),
            headers={"Accept": NOTE_JSON_MEDIA_TYPE},
        )

    def create_or_update_vault_note(self, filename: str, content: str) -> ApiRequest:
        return ApiRequest(
            method="PUT",
            path=vault_file_path(_require_filename(filename)),
            headers={"Content-Type": MARKDOWN_MEDIA_TYPE},
            content=_markdown(content),
        )

    def append_to_vault_note(self, filename: str, content: str) -> ApiRequest:
        return ApiRequest(
            method="POST",
            path=vault_file_path(_require_filename(filename)),
            headers={"Content-Type": MARKDOWN_MEDIA_TYPE},
            content=_markdown(content),
        )

    def delete_vault_note(self, filename: str) -> ApiRequest:
        return ApiRequest(method="DELETE", path=vault_file_path(_require_filename(filename)))

    def patch_vault_note(
        self,
        filename: str,
        content: str,
        parameters: PatchParameters,
    ) -> ApiRequest:
        return ApiRequest(
            method="PATCH",
            path=vault_file_path(_require_filename(filename)),
            headers=self.patch_headers(parameters, MARKDOWN_MEDIA_TYPE),
            content=_markdown(content),
        )

    def set_vault_frontmatter(
        self,
        filename: str,
        payload: str,
        operation: PatchOperation,
        key: str,
    ) -> ApiRequest:
        """Build a frontmatter field patch for a vault note.

        Args:
            filename: Vault-relative path of the note.
            payload: JSON document holding the new value.
            operation: ``replace`` or ``append``.
            key: Frontmatter field name.
        """
        parameters = PatchParameters(operation, TargetType.FRONTMATTER, key)
        return ApiRequest(
            method="PATCH",
            path=vault_file_path(_require_filename(filename)),
            headers=self.patch_headers(parameters, JSON_MEDIA_TYPE),
            content=payload.encode("utf-8"),
        )

    # --------------------------------------------------------------------------
    # Directory listing & search
    # --------------------------------------------------------------------------

    def list_vault_directory(self, directory: str) -> ApiRequest:
        return ApiRequest(method="GET", path=vault_directory_path(directory))

    def search_vault(self, query: str) -> ApiRequest:
        return ApiRequest(
            method="POST",
            path=SEARCH_PATH,
            headers={"Accept": JSON_MEDIA_TYPE},
            params={"query": query, "contextLength": str(SEARCH_CONTEXT_LENGTH)},
        )

    # --------------------------------------------------------------------------
    # Periodic notes
    # --------------------------------------------------------------------------

    def get_periodic_note(
        self,
        period: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> ApiRequest:
        return ApiRequest(
            method="GET",
            path=periodic_path(period, year, month, day),
            headers={"Accept": NOTE_JSON_MEDIA_TYPE},
        )

    def create_or_update_periodic_note(
        self,
        period: str,
        content: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> ApiRequest:
        return ApiRequest(
            method="PUT",
            path=periodic_path(period, year, month, day),
            headers={"Content-Type": MARKDOWN_MEDIA_TYPE},
            content=_markdown(content),
        )

    def append_to_periodic_note(
        self,
        period: str,
        content: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> ApiRequest:
        return ApiRequest(
            method="POST",
            path=periodic_path(period, year, month, day),
            headers={"Content-Type": MARKDOWN_MEDIA_TYPE},
            content=_markdown(content),
        )

    def delete_periodic_note(
        self,
        period: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> ApiRequest:
        return ApiRequest(method="DELETE", path=periodic_path(period, year, month, day))

    # --------------------------------------------------------------------------
    # Helpers
    # --------------------------------------------------------------------------

    @staticmethod
    def patch_headers(parameters: PatchParameters, content_type: str) -> dict[str, str]:
        """Return the header set the PATCH endpoints require."""
        return {
            "Content-Type": content_type,
            "Operation": parameters.operation.value,
            "Target-Type": parameters.target_type.value,
            "Target-Delimiter": TARGET_DELIMITER,
            "Trim-Target-Whitespace": "true",
            "Create-Target-If-Missing": "true",
            "Target": encode_target(parameters.target),
        }
