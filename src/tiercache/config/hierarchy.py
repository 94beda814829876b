"""Configuration hierarchy — merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.tiercache/config.yaml)
  3. Project config   (./tiercache.yaml, searched upward)
  4. Environment variables (TIERCACHE_*)
  5. Runtime arguments

Values are merged raw; CacheConfig does the type coercion and validation.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from tiercache.config.defaults import get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".tiercache" / "config.yaml"
_PROJECT_CONFIG_NAME = "tiercache.yaml"

_ENV_MAP: dict[str, str] = {
    "TIERCACHE_DIR": "directory",
    "TIERCACHE_MEMORY_COUNT_LIMIT": "memory_count_limit",
    "TIERCACHE_MEMORY_COST_LIMIT_MB": "memory_cost_limit_mb",
    "TIERCACHE_CODEC": "codec",
    "TIERCACHE_IMAGE_FORMAT": "image_format",
    "TIERCACHE_IMAGE_QUALITY": "image_quality",
    "TIERCACHE_LOG_LEVEL": "log_level",
}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Return the merged, unvalidated settings from every source."""
    config = get_defaults()
    layers = (
        _read_yaml(_GLOBAL_CONFIG_PATH),
        _read_yaml(_find_project_config()),
        {key: os.environ[env] for env, key in _ENV_MAP.items() if env in os.environ},
        {key: value for key, value in runtime_overrides.items() if value is not None},
    )
    for layer in layers:
        config.update(layer)
    return config


def _read_yaml(path: Path | None) -> dict[str, Any]:
    if path is None or not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring", path)
        return {}
    return data


def _find_project_config() -> Path | None:
    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / _PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None
