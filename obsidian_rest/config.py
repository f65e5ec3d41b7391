"""Configuration loading for the Local REST API connection."""

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from obsidian_rest.constants import (
    API_KEY_ENV,
    BASE_URL_ENV,
    CONFIG_PATH,
    CONFIG_PATH_ENV,
    DEFAULT_BASE_URL,
    DEFAULT_BULK_CONCURRENCY,
    DEFAULT_TIMEOUT,
)
from obsidian_rest.data_models import ServerConfiguration

logger = logging.getLogger(__name__)


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        logger.info("No configuration file at %s, using defaults", config_path)
        return {}

    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")
    return raw_config


def load_server_configuration(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ServerConfiguration:
    """Load and validate the connection settings.

    Settings come from a YAML file (``obsidian.yaml`` next to the package, or the
    path named by ``OBSIDIAN_CONFIG``). ``OBSIDIAN_BASE_URL`` and
    ``OBSIDIAN_API_KEY`` override the file. A missing file means defaults.

    Args:
        config_path: Explicit YAML file to read.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        A validated :class:`ServerConfiguration`.

    Raises:
        ValueError: If the file exists but does not provide the expected structure
            (non-mapping document, wrong value types, empty base URL, etc.).
    """
    env = os.environ if environ is None else environ
    if config_path is None:
        config_path = Path(env[CONFIG_PATH_ENV]) if env.get(CONFIG_PATH_ENV) else CONFIG_PATH

    raw_config = _read_config_file(config_path)

    base_url = env.get(BASE_URL_ENV) or raw_config.get("base_url", DEFAULT_BASE_URL)
    if not isinstance(base_url, str) or not base_url.strip():
        raise ValueError("Configuration 'base_url' must be a non-empty string")

    api_key = env.get(API_KEY_ENV) or raw_config.get("api_key")
    if api_key is not None and not isinstance(api_key, str):
        raise ValueError("Configuration 'api_key' must be a string")

    verify_tls = raw_config.get("verify_tls", False)
    if not isinstance(verify_tls, bool):
        raise ValueError("Configuration 'verify_tls' must be true or false")

    timeout = raw_config.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("Configuration 'timeout' must be a positive number of seconds")

    bulk_concurrency = raw_config.get("bulk_concurrency", DEFAULT_BULK_CONCURRENCY)
    if isinstance(bulk_concurrency, bool) or not isinstance(bulk_concurrency, int) or bulk_concurrency < 1:
        raise ValueError("Configuration 'bulk_concurrency' must be an integer >= 1")

    return ServerConfiguration(
        base_url=base_url.strip().rstrip("/"),
        api_key=api_key or None,
        verify_tls=verify_tls,
        timeout=float(timeout),
        bulk_concurrency=bulk_concurrency,
    )
