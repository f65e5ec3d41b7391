"""Shared fixtures: an in-memory stand-in for the Obsidian Local REST API."""

import json
from typing import Any, Optional, Union

import httpx
import pytest

from obsidian_rest.core.executor import HttpxExecutor, StaticTokenProvider
from obsidian_rest.core.repository import VaultRepository

BASE_URL = "https://127.0.0.1:27124"
API_KEY = "test-api-key"


class FakeObsidianApi:
    """Routes httpx requests the way the Local REST API plugin does.

    Notes live in ``notes`` (vault path -> content) with their frontmatter in
    ``frontmatter``. ``directories`` maps a directory ("" for the root) to its
    raw listing. ``failures`` forces a status code, or a whole response, for a decoded URL path.
    """

    def __init__(self) -> None:
        self.notes: dict[str, str] = {}
        self.frontmatter: dict[str, dict[str, Any]] = {}
        self.active: Optional[str] = None
        self.directories: dict[str, list[str]] = {}
        self.search_hits: list[dict[str, Any]] = []
        self.periodic: dict[str, str] = {}
        self.failures: dict[str, Union[int, httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    # --------------------------------------------------------------------------
    # Helpers
    # --------------------------------------------------------------------------

    def add_note(self, path: str, content: str = "", frontmatter: Optional[dict] = None) -> None:
        self.notes[path] = content
        self.frontmatter[path] = dict(frontmatter or {})

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        return [
            request for request in self.requests
            if request.method == method and request.url.path == path
        ]

    def _note_response(self, path: str, content: str) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "path": path,
                "content": content,
                "frontmatter": self.frontmatter.get(path, {}),
                "tags": [],
                "stat": {"ctime": 1700000000000, "mtime": 1700000000500, "size": len(content)},
            },
        )

    def _apply_patch(self, path: str, request: httpx.Request) -> httpx.Response:
        if request.headers["Target-Type"] != "frontmatter":
            self.notes[path] += request.content.decode("utf-8")
            return httpx.Response(200)

        key = request.headers["Target"]
        value = json.loads(request.content)
        fields = self.frontmatter.setdefault(path, {})
        if request.headers["Operation"] == "replace" or key not in fields:
            fields[key] = value
        elif isinstance(fields[key], list):
            fields[key] = fields[key] + (value if isinstance(value, list) else [value])
        else:
            fields[key] = f"{fields[key]}{value}"
        return httpx.Response(200)

    # --------------------------------------------------------------------------
    # Routing
    # --------------------------------------------------------------------------

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        method = request.method

        if path in self.failures:
            failure = self.failures[path]
            if isinstance(failure, httpx.Response):
                return failure
            return httpx.Response(failure)

        if path == "/":
            return httpx.Response(
                200,
                json={
                    "status": "OK",
                    "service": "Obsidian Local REST API",
                    "authenticated": True,
                    "versions": {"obsidian": "1.5.3", "self": "3.0.1"},
                },
            )

        if path == "/search/simple/" and method == "POST":
            return httpx.Response(200, json=self.search_hits)

        if path == "/active/":
            return self._active(request)

        if path.startswith("/vault/"):
            relative = path[len("/vault/"):]
            if relative == "" or relative.endswith("/"):
                return self._listing(relative.rstrip("/"))
            return self._vault_file(relative, request)

        if path.startswith("/periodic/"):
            return self._periodic(path, request)

        return httpx.Response(404)

    def _active(self, request: httpx.Request) -> httpx.Response:
        if self.active is None:
            return httpx.Response(404)
        return self._vault_file(self.active, request)

    def _listing(self, directory: str) -> httpx.Response:
        if directory not in self.directories:
            return httpx.Response(404)
        return httpx.Response(200, json={"files": self.directories[directory]})

    def _vault_file(self, path: str, request: httpx.Request) -> httpx.Response:
        method = request.method
        if method == "GET":
            if path not in self.notes:
                return httpx.Response(404)
            return self._note_response(path, self.notes[path])
        if method == "PUT":
            self.notes[path] = request.content.decode("utf-8")
            self.frontmatter.setdefault(path, {})
            return httpx.Response(204)
        if method == "POST":
            self.notes[path] = self.notes.get(path, "") + request.content.decode("utf-8")
            self.frontmatter.setdefault(path, {})
            return httpx.Response(204)
        if method == "DELETE":
            if path not in self.notes:
                return httpx.Response(404)
            del self.notes[path]
            self.frontmatter.pop(path, None)
            if path == self.active:
                self.active = None
            return httpx.Response(204)
        if method == "PATCH":
            if path not in self.notes:
                return httpx.Response(404)
            return self._apply_patch(path, request)
        return httpx.Response(405)

    def _periodic(self, path: str, request: httpx.Request) -> httpx.Response:
        method = request.method
        if method == "GET":
            if path not in self.periodic:
                return httpx.Response(404)
            return self._note_response(path.strip("/") + ".md", self.periodic[path])
        if method == "PUT":
            self.periodic[path] = request.content.decode("utf-8")
            return httpx.Response(204)
        if method == "POST":
            self.periodic[path] = self.periodic.get(path, "") + request.content.decode("utf-8")
            return httpx.Response(204)
        if method == "DELETE":
            if path not in self.periodic:
                return httpx.Response(404)
            del self.periodic[path]
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def api() -> FakeObsidianApi:
    return FakeObsidianApi()


@pytest.fixture
def executor(api: FakeObsidianApi) -> HttpxExecutor:
    return HttpxExecutor(
        BASE_URL,
        StaticTokenProvider(API_KEY),
        transport=httpx.MockTransport(api.handler),
    )


@pytest.fixture
def repository(executor: HttpxExecutor) -> VaultRepository:
    return VaultRepository(executor)
