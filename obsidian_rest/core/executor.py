"""HTTP execution against the Local REST API.

The executor sends exactly one request and hands back the raw status code with
the decoded body. Pooling, TLS and timeouts live here (in the
underlying ``httpx.AsyncClient``), never in the repository.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Generator, Optional, Protocol
from urllib.parse import quote

import httpx

from obsidian_rest.core.requests import ApiRequest
from obsidian_rest.data_models import ServerConfiguration

logger = logging.getLogger(__name__)


# ==============================================================================
# AUTHENTICATION
# ==============================================================================


class TokenProvider(Protocol):
    """Supplies the current API credential. Consulted once per request."""

    def current_token(self) -> Optional[str]:
        ...


class StaticTokenProvider:
    """Always returns the same token (or none)."""

    def __init__(self, token: Optional[str]) -> None:
        self._token = token

    def current_token(self) -> Optional[str]:
        return self._token


class EnvironmentTokenProvider:
    """Re-reads an environment variable on every request so keys can rotate.

    Falls back to ``fallback`` when the variable is unset or empty.
    """

    def __init__(self, variable: str, fallback: Optional[str] = None) -> None:
        self.variable = variable
        self.fallback = fallback

    def current_token(self) -> Optional[str]:
        return os.environ.get(self.variable) or self.fallback


class BearerTokenAuth(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` when the provider yields one."""

    def __init__(self, provider: TokenProvider) -> None:
        self.provider = provider

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.provider.current_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


# ==============================================================================
# EXECUTION
# ==============================================================================


@dataclass(frozen=True)
class ApiResponse:
    """Raw outcome of one request.

    ``status_code`` is ``None`` when no response object could be obtained.
    ``body`` is the decoded JSON document for JSON responses, the text for other
    non-empty responses, and ``None`` for empty ones. Error responses (non-2xx)
    always carry ``None``; only their status code is meaningful.
    """

    status_code: Optional[int]
    body: Any = None


class HttpExecutor(Protocol):
    """Sends one :class:`ApiRequest` and returns its :class:`ApiResponse`."""

    async def execute(self, request: ApiRequest) -> ApiResponse:
        ...


def _wire_path(path: str) -> str:
    # Filenames may contain spaces, '?' or '#'; keep them inside the path.
    return quote(path, safe="/")


def decode_body(response: httpx.Response) -> Any:
    """Decode an httpx response body according to its media type.

    Raises:
        ValueError: If a JSON media type is declared but the body is not JSON.
    """
    if not response.content:
        return None

    content_type = response.headers.get("Content-Type", "")
    if "json" in content_type:
        return response.json()
    return response.text


class HttpxExecutor:
    """:class:`HttpExecutor` backed by a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        token_provider: Optional[TokenProvider] = None,
        *,
        verify: bool = False,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            auth=BearerTokenAuth(token_provider) if token_provider is not None else None,
            verify=verify,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_configuration(
        cls,
        configuration: ServerConfiguration,
        token_provider: Optional[TokenProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HttpxExecutor":
        """Build an executor from loaded :class:`ServerConfiguration`."""
        return cls(
            configuration.base_url,
            token_provider or StaticTokenProvider(configuration.api_key),
            verify=configuration.verify_tls,
            timeout=configuration.timeout,
            transport=transport,
        )

    async def execute(self, request: ApiRequest) -> ApiResponse:
        logger.debug("%s %s", request.method, request.path)
        response = await self._client.request(
            request.method,
            _wire_path(request.path),
            headers=dict(request.headers),
            content=request.content,
            params=dict(request.params) or None,
        )
        if not response.is_success:
            # Non-2xx bodies are never decoded; only the status is validated
            return ApiResponse(status_code=response.status_code)
        return ApiResponse(status_code=response.status_code, body=decode_body(response))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxExecutor":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
