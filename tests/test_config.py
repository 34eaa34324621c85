from __future__ import annotations

import json
from pathlib import Path

from appatlas.app.config import (
    DEFAULT_DB_TIMEOUT,
    PipelineDirectoryConfig,
    get_db_options,
    get_default_timeout,
    get_path_config,
    get_pipeline_directory_config,
    load_config,
)
from appatlas.interfaces.cli.context import build_cli_context


def _write_config(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "absent.json"

    assert load_config(config_path) == {}
    assert get_path_config(config_path)["store_path"] == tmp_path / "store.db"
    assert get_default_timeout(config_path) == DEFAULT_DB_TIMEOUT
    assert get_pipeline_directory_config(config_path) == PipelineDirectoryConfig()


def test_relative_store_path_resolves_against_config_dir(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, {"paths": {"store_path": "data/apps.db"}})

    assert get_path_config(config_path)["store_path"] == (tmp_path / "data" / "apps.db").resolve()


def test_environment_variable_selects_config(tmp_path: Path, monkeypatch) -> None:
    config_path = _write_config(tmp_path, {"db_timeout_seconds": 5})
    monkeypatch.setenv("APPATLAS_CONFIG", str(config_path))

    assert get_default_timeout() == 5.0


def test_invalid_pipeline_values_fall_back(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        {
            "pipeline_directory": {
                "base_url": "http://pipelines.internal",
                "timeout_seconds": "soon",
                "page_size": None,
            }
        },
    )

    settings = get_pipeline_directory_config(config_path)

    assert settings.base_url == "http://pipelines.internal"
    assert settings.timeout_seconds == 10.0
    assert settings.page_size == 50


def test_cli_flags_override_config(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        {
            "paths": {"store_path": "configured.db"},
            "pipeline_directory": {"base_url": "http://configured", "page_size": 10},
        },
    )

    context = build_cli_context(
        store_path=tmp_path / "flag.db",
        pipeline_url="http://flag",
        config_path=config_path,
    )

    assert context.store_path == tmp_path / "flag.db"
    assert context.pipeline_directory.base_url == "http://flag"
    assert context.pipeline_directory.page_size == 10


def test_db_options_read_from_config_file(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, {"db": {"enable_wal": False}})

    assert get_db_options(config_path) == {"enable_wal": False, "foreign_keys": True}
    assert build_cli_context(config_path=config_path).db_options == {
        "enable_wal": False,
        "foreign_keys": True,
    }
