"""Typed payloads returned by the Local REST API.

Payloads are decoded with pydantic after the status code has been validated.
Decoding failures surface as :class:`pydantic.ValidationError`.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Strict members keep YAML booleans from decoding as integers.
FrontmatterScalar = Union[StrictBool, StrictInt, StrictFloat, StrictStr, None]
FrontmatterValue = Union[
    FrontmatterScalar,
    list[FrontmatterScalar],
    dict[str, Union[FrontmatterScalar, list[FrontmatterScalar], dict[str, Any]]],
]


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ServerVersions(_Payload):
    obsidian: Optional[str] = None
    self_: str = Field(alias="self")


class ServerInfoPayload(_Payload):
    """Body of ``GET /``."""

    service: str
    versions: ServerVersions
    authenticated: bool = False
    status: Optional[str] = None


class NoteStat(_Payload):
    ctime: float
    mtime: float
    size: int


class NoteJsonPayload(_Payload):
    """Body of a note fetched with ``Accept: application/vnd.olrapi.note+json``."""

    path: str
    content: str
    frontmatter: dict[str, FrontmatterValue] = Field(default_factory=dict)
    stat: Optional[NoteStat] = None
    tags: list[str] = Field(default_factory=list)


class DirectoryListingPayload(_Payload):
    """Body of a directory listing. Directories end with ``/``."""

    files: list[str]


class SearchHitPayload(_Payload):
    """One element of the ``/search/simple/`` response array."""

    filename: str
    score: float
