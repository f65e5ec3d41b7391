"""Obsidian REST MCP Server

Obsidian vault operations over the Local REST API plugin, exposed via
Model Context Protocol.
"""

from obsidian_rest.config import load_server_configuration
from obsidian_rest.core.repository import VaultRepository
from obsidian_rest.core.requests import RequestBuilder
from obsidian_rest.data_models import (
    BulkOperationFailure,
    BulkOperationResult,
    File,
    PatchOperation,
    PatchParameters,
    SearchResult,
    ServerConfiguration,
    ServerInformation,
    TargetType,
)
from obsidian_rest.errors import InvalidResponseError, OperationFailedError, RepositoryError
from obsidian_rest.session import get_repository, set_repository
from obsidian_rest.server import mcp, run_server

# Import tools to register them with the MCP server
from obsidian_rest import tools  # noqa: F401

__version__ = "0.1.0"
__all__ = [
    "load_server_configuration",
    "VaultRepository",
    "RequestBuilder",
    "BulkOperationFailure",
    "BulkOperationResult",
    "File",
    "PatchOperation",
    "PatchParameters",
    "SearchResult",
    "ServerConfiguration",
    "ServerInformation",
    "TargetType",
    "RepositoryError",
    "OperationFailedError",
    "InvalidResponseError",
    "get_repository",
    "set_repository",
    "mcp",
    "run_server",
]
