"""MCP tool definitions for Obsidian Local REST API operations.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from obsidian_rest.tools import note_tools
from obsidian_rest.tools import frontmatter_tools
from obsidian_rest.tools import search_tools
from obsidian_rest.tools import bulk_tools
from obsidian_rest.tools import periodic_tools

__all__ = [
    "note_tools",
    "frontmatter_tools",
    "search_tools",
    "bulk_tools",
    "periodic_tools",
]
