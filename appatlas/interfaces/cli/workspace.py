"""Workspace discovery for default command values.

A workspace is a directory holding ``.appatlas/workspace.json``. Commands run
anywhere below it pick up the application recorded there as their default
``--name``.
"""

from __future__ import annotations

import json
from pathlib import Path

WORKSPACE_DIR = ".appatlas"
WORKSPACE_FILE = "workspace.json"


def find_workspace_file(start: Path | None = None) -> Path | None:
    """Return the nearest workspace file at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / WORKSPACE_DIR / WORKSPACE_FILE
        if candidate.is_file():
            return candidate
    return None


def try_reading_app_name(start: Path | None = None) -> str | None:
    """Return the workspace application name, or None outside a workspace."""
    path = find_workspace_file(start)
    if path is None:
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    name = payload.get("application")
    return name if isinstance(name, str) and name else None
