"""Path composition for Local REST API endpoints.

Filenames and directories are forwarded verbatim: no ``..`` or absolute-path
checks happen here. The Local REST API is trusted local infrastructure that
resolves paths inside its own vault, so traversal protection is its concern.
"""

from __future__ import annotations

from typing import Optional

from obsidian_rest.constants import PERIODIC_PREFIX, PERIODS, VAULT_PREFIX


def vault_file_path(filename: str) -> str:
    """Build the endpoint path of a vault file.

    The filename is joined to ``/vault`` as a single path component, so a
    leading slash never produces ``/vault//``.

    Examples:
        >>> vault_file_path("Projects/Plan.md")
        '/vault/Projects/Plan.md'
        >>> vault_file_path("/Plan.md")
        '/vault/Plan.md'
    """
    return f"{VAULT_PREFIX}/{filename.lstrip('/')}"


def vault_directory_path(directory: str) -> str:
    """Build the endpoint path of a vault directory listing.

    The trailing slash is mandatory for the API to treat the path as a
    directory.

    Examples:
        >>> vault_directory_path("")
        '/vault/'
        >>> vault_directory_path("Projects")
        '/vault/Projects/'
    """
    trimmed = directory.strip("/")
    if not trimmed:
        return f"{VAULT_PREFIX}/"
    return f"{VAULT_PREFIX}/{trimmed}/"


def periodic_path(
    period: str,
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
) -> str:
    """Build the endpoint path of a periodic note.

    Month and day are not zero-padded; the API expects ``/2024/3/7/``.

    Raises:
        ValueError: If ``period`` is unknown or only part of a date is given.
    """
    if period not in PERIODS:
        raise ValueError(
            f"Unknown period '{period}'. Expected one of: {', '.join(PERIODS)}."
        )

    date_parts = (year, month, day)
    if all(part is None for part in date_parts):
        return f"{PERIODIC_PREFIX}/{period}/"
    if any(part is None for part in date_parts):
        raise ValueError("A periodic note date needs year, month and day together.")

    return f"{PERIODIC_PREFIX}/{period}/{year}/{month}/{day}/"


def join_path(base: str, entry: str) -> str:
    """Join a listing entry onto its directory with a single ``/``.

    An empty base means the vault root and adds no prefix.
    """
    if not base:
        return entry
    if base.endswith("/"):
        return f"{base}{entry}"
    return f"{base}/{entry}"
