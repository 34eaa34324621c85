"""Configuration utilities for appatlas.

Configuration lives in a single JSON file. The default location is
``~/.appatlas/config.json``; the ``APPATLAS_CONFIG`` environment variable or
an explicit path overrides it. A missing file means "use the defaults".
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

DEFAULT_DB_TIMEOUT = 30.0
DEFAULT_PIPELINE_DIRECTORY_URL = "http://localhost:8080"
DEFAULT_PIPELINE_TIMEOUT = 10.0
DEFAULT_PIPELINE_PAGE_SIZE = 50

CONFIG_ENV_VAR = "APPATLAS_CONFIG"
_CONFIG_FILE = Path.home() / ".appatlas" / "config.json"


@dataclass(frozen=True)
class PipelineDirectoryConfig:
    """Connection settings for the pipeline directory service."""

    base_url: str = DEFAULT_PIPELINE_DIRECTORY_URL
    timeout_seconds: float = DEFAULT_PIPELINE_TIMEOUT
    page_size: int = DEFAULT_PIPELINE_PAGE_SIZE


def _resolve_config_path(config_path: Path | str | None) -> Path:
    if config_path is not None:
        return Path(config_path).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return _CONFIG_FILE


def load_config(config_path: Path | str | None = None) -> Dict[str, Any]:
    """Load the JSON configuration file if present and return it as a dictionary."""

    path = _resolve_config_path(config_path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def get_path_config(config_path: Path | str | None = None) -> Dict[str, Path]:
    """Return resolved filesystem paths from the project configuration."""

    cfg = load_config(config_path)
    root = _resolve_config_path(config_path).parent
    defaults = {
        "store_path": root / "store.db",
    }
    paths_cfg = cfg.get("paths", {}) if isinstance(cfg.get("paths", {}), dict) else {}
    resolved: Dict[str, Path] = {}
    for key, default_value in defaults.items():
        raw_value = paths_cfg.get(key, default_value)
        resolved_value = Path(raw_value).expanduser()
        if not resolved_value.is_absolute():
            resolved_value = (root / resolved_value).resolve()
        resolved[key] = resolved_value
    return resolved


def get_default_timeout(config_path: Path | str | None = None) -> float:
    """Read the preferred database timeout from configuration."""

    cfg = load_config(config_path)
    try:
        return float(cfg.get("db_timeout_seconds", DEFAULT_DB_TIMEOUT))
    except (TypeError, ValueError):
        return DEFAULT_DB_TIMEOUT


def get_db_options(config_path: Path | str | None = None) -> Dict[str, bool]:
    """Return the SQLite pragma switches from the ``db`` section."""

    cfg = load_config(config_path)
    db_cfg = cfg.get("db", {}) if isinstance(cfg.get("db"), dict) else {}
    return {
        "enable_wal": bool(db_cfg.get("enable_wal", True)),
        "foreign_keys": bool(db_cfg.get("foreign_keys", True)),
    }


def get_pipeline_directory_config(
    config_path: Path | str | None = None,
) -> PipelineDirectoryConfig:
    """Read the pipeline directory settings, falling back to defaults per key."""

    cfg = load_config(config_path)
    section = cfg.get("pipeline_directory", {})
    if not isinstance(section, dict):
        section = {}
    try:
        timeout = float(section.get("timeout_seconds", DEFAULT_PIPELINE_TIMEOUT))
    except (TypeError, ValueError):
        timeout = DEFAULT_PIPELINE_TIMEOUT
    try:
        page_size = int(section.get("page_size", DEFAULT_PIPELINE_PAGE_SIZE))
    except (TypeError, ValueError):
        page_size = DEFAULT_PIPELINE_PAGE_SIZE
    return PipelineDirectoryConfig(
        base_url=str(section.get("base_url", DEFAULT_PIPELINE_DIRECTORY_URL)),
        timeout_seconds=timeout,
        page_size=page_size,
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_DB_TIMEOUT",
    "PipelineDirectoryConfig",
    "get_db_options",
    "get_default_timeout",
    "get_path_config",
    "get_pipeline_directory_config",
    "load_config",
]
