"""Allow ``python -m obsidian_rest``."""

from obsidian_rest import run_server

run_server()
