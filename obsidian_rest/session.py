"""Process-wide repository used by the MCP tools."""

import logging
import os
from typing import Optional

from obsidian_rest.config import load_server_configuration
from obsidian_rest.constants import API_KEY_ENV
from obsidian_rest.core.executor import EnvironmentTokenProvider, HttpxExecutor
from obsidian_rest.core.repository import VaultRepository

logger = logging.getLogger(__name__)

# Built on first use so importing the package never reads configuration
_REPOSITORY: Optional[VaultRepository] = None


def build_repository() -> VaultRepository:
    """Create a repository from the current configuration.

    The API key is re-read from ``OBSIDIAN_API_KEY`` on every request, falling
    back to the key in the configuration file, so it can be rotated or
    revoked without a restart.
    """
    # Fallback is the file key only; the environment is consulted per request
    environ = {name: value for name, value in os.environ.items() if name != API_KEY_ENV}
    configuration = load_server_configuration(environ=environ)
    token_provider = EnvironmentTokenProvider(API_KEY_ENV, fallback=configuration.api_key)
    executor = HttpxExecutor.from_configuration(configuration, token_provider)
    logger.info("Connecting to Obsidian Local REST API at %s", configuration.base_url)
    return VaultRepository(executor, bulk_concurrency=configuration.bulk_concurrency)


def get_repository() -> VaultRepository:
    """Return the shared repository, building it on first use."""
    global _REPOSITORY
    if _REPOSITORY is None:
        _REPOSITORY = build_repository()
    return _REPOSITORY


def set_repository(repository: Optional[VaultRepository]) -> None:
    """Replace the shared repository (``None`` resets it)."""
    global _REPOSITORY
    _REPOSITORY = repository


async def close_repository() -> None:
    """Close the shared repository's connections and reset it."""
    global _REPOSITORY
    repository, _REPOSITORY = _REPOSITORY, None
    if repository is not None:
        logger.info("Closing Obsidian Local REST API connections")
        await repository.aclose()
