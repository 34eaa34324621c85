from __future__ import annotations

import json
from pathlib import Path

from appatlas.interfaces.cli.workspace import find_workspace_file, try_reading_app_name


def _write_workspace(root: Path, payload) -> Path:
    workspace = root / ".appatlas"
    workspace.mkdir(parents=True)
    path = workspace / "workspace.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_reads_application_from_parent_directory(tmp_path: Path) -> None:
    path = _write_workspace(tmp_path, {"application": "my-app"})
    nested = tmp_path / "services" / "api"
    nested.mkdir(parents=True)

    assert find_workspace_file(nested) == path
    assert try_reading_app_name(nested) == "my-app"


def test_outside_workspace_returns_none(tmp_path: Path) -> None:
    assert try_reading_app_name(tmp_path) is None


def test_malformed_workspace_returns_none(tmp_path: Path) -> None:
    workspace = tmp_path / ".appatlas"
    workspace.mkdir()
    (workspace / "workspace.json").write_text("{not json", encoding="utf-8")

    assert try_reading_app_name(tmp_path) is None


def test_workspace_without_application_returns_none(tmp_path: Path) -> None:
    _write_workspace(tmp_path, {"application": ""})

    assert try_reading_app_name(tmp_path) is None
