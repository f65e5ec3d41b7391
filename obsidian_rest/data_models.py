"""Value objects returned by the repository and used to configure it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class File:
    """A vault note: its path inside the vault and its raw markdown."""

    filename: str
    content: str = ""

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {"filename": self.filename, "content": self.content}


@dataclass(frozen=True)
class ServerInformation:
    """Identity of the wrapped Local REST API."""

    service: str
    version: str

    def as_payload(self) -> dict[str, Any]:
        return {"service": self.service, "version": self.version}


@dataclass(frozen=True)
class SearchResult:
    """One match of a simple vault search. Scores are not normalized."""

    path: str
    score: float

    def as_payload(self) -> dict[str, Any]:
        return {"path": self.path, "score": self.score}


class PatchOperation(str, Enum):
    """How patched content is combined with the target."""

    APPEND = "append"
    PREPEND = "prepend"
    REPLACE = "replace"


class TargetType(str, Enum):
    """Which part of a note a patch addresses."""

    HEADING = "heading"
    FRONTMATTER = "frontmatter"
    DOCUMENT = "document"
    BLOCK = "block"
    LINE = "line"


@dataclass(frozen=True)
class PatchParameters:
    """Intent for a targeted edit of a note.

    ``target`` identifies the heading path (``Heading::Subheading``), block
    reference, line, or frontmatter key. It may only be empty when the whole
    document is targeted.
    """

    operation: PatchOperation
    target_type: TargetType
    target: str = ""

    def __post_init__(self) -> None:
        # Accept plain strings for convenience; normalize to the enums.
        object.__setattr__(self, "operation", PatchOperation(self.operation))
        object.__setattr__(self, "target_type", TargetType(self.target_type))
        if not self.target and self.target_type is not TargetType.DOCUMENT:
            raise ValueError(
                f"Patch target cannot be empty for target type '{self.target_type.value}'."
            )


@dataclass(frozen=True)
class BulkOperationFailure:
    """A single file that could not be processed during a bulk operation."""

    filename: str
    error: str

    def as_payload(self) -> dict[str, Any]:
        return {"filename": self.filename, "error": self.error}


@dataclass(frozen=True)
class BulkOperationResult:
    """Outcome of applying one mutation to every file matched by a search.

    Every matched filename appears exactly once, either in ``successful`` or in
    ``failed``; ``total_processed`` is the number of matches.
    """

    successful: list[str]
    failed: list[BulkOperationFailure]
    total_processed: int
    query: str

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "successful": list(self.successful),
            "failed": [failure.as_payload() for failure in self.failed],
            "total_processed": self.total_processed,
            "query": self.query,
        }


@dataclass(frozen=True)
class ServerConfiguration:
    """Connection settings for the Local REST API."""

    base_url: str
    api_key: str | None = None
    verify_tls: bool = False
    timeout: float = 30.0
    bulk_concurrency: int = 4

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation (the API key is masked)."""
        return {
            "base_url": self.base_url,
            "api_key_configured": bool(self.api_key),
            "verify_tls": self.verify_tls,
            "timeout": self.timeout,
            "bulk_concurrency": self.bulk_concurrency,
        }
