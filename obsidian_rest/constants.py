"""Module-level constants for the Obsidian REST MCP server."""

from pathlib import Path

# Configuration
CONFIG_PATH = Path(__file__).parent.parent / "obsidian.yaml"
CONFIG_PATH_ENV = "OBSIDIAN_CONFIG"
BASE_URL_ENV = "OBSIDIAN_BASE_URL"
API_KEY_ENV = "OBSIDIAN_API_KEY"

DEFAULT_BASE_URL = "https://127.0.0.1:27124"
DEFAULT_TIMEOUT = 30.0
DEFAULT_BULK_CONCURRENCY = 4

# Media types
NOTE_JSON_MEDIA_TYPE = "application/vnd.olrapi.note+json"
JSON_MEDIA_TYPE = "application/json"
MARKDOWN_MEDIA_TYPE = "text/markdown"
ACTIVE_MARKDOWN_MEDIA_TYPE = "text/markdown; charset=utf-8"

# Patch headers
TARGET_DELIMITER = "::"
# Characters left unescaped in the Target header besides the unreserved set
TARGET_SAFE_CHARACTERS = "!$'()*,/:;@"

# Endpoints
ACTIVE_PATH = "/active/"
VAULT_PREFIX = "/vault"
SEARCH_PATH = "/search/simple/"
PERIODIC_PREFIX = "/periodic"

# Search
SEARCH_CONTEXT_LENGTH = 100

# Directory listing
MAX_DIRECTORY_DEPTH = 2

# Periodic notes
PERIODS = ("daily", "weekly", "monthly", "quarterly", "yearly")

# Logging
LOG_LEVEL = "INFO"
