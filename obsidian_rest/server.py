"""FastMCP server initialization and tool registration."""

import logging
from contextlib import asynccontextmanager
from mcp.server.fastmcp import FastMCP

from obsidian_rest.constants import LOG_LEVEL
from obsidian_rest.session import close_repository

# Initialize logger
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(server: FastMCP):
    try:
        yield {}
    finally:
        await close_repository()


# Initialize FastMCP server
mcp = FastMCP("obsidian_rest", lifespan=_lifespan)

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


def run_server():
    """Start the MCP server with stdio transport."""
    logger.info("Starting Obsidian REST MCP Server")
    mcp.run(transport="stdio")
