"""Shared helpers for composing CLI command contexts.

This module centralises CLI wiring: resolving the configuration file,
locating the configuration store and building the pipeline directory client.
Commands receive fully built collaborators from here and never construct
their own.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from appatlas.app.config import (
    PipelineDirectoryConfig,
    get_db_options,
    get_default_timeout,
    get_path_config,
    get_pipeline_directory_config,
)
from appatlas.infrastructure.http import PipelineDirectoryClient
from appatlas.services.config_store import SqliteConfigStore


@dataclass(frozen=True)
class CLIContext:
    """Container for CLI dependencies and configuration."""

    store_path: Path
    db_timeout: float
    db_options: dict[str, bool]
    pipeline_directory: PipelineDirectoryConfig
    config_path: Path | None = None

    def config_store(self) -> SqliteConfigStore:
        """Return a store bound to the configured database, which must already exist."""

        return SqliteConfigStore.from_sqlite_path(
            self.store_path,
            timeout=self.db_timeout,
            must_exist=True,
            config_path=self.config_path,
            **self.db_options,
        )


@contextmanager
def pipeline_directory_client(cli_context: CLIContext) -> Iterator[PipelineDirectoryClient]:
    """Yield a PipelineDirectoryClient and close its session afterwards."""

    settings = cli_context.pipeline_directory
    client = PipelineDirectoryClient(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
        page_size=settings.page_size,
    )
    try:
        yield client
    finally:
        client.session.close()


def build_cli_context(
    *,
    store_path: str | Path | None = None,
    pipeline_url: str | None = None,
    config_path: str | Path | None = None,
) -> CLIContext:
    """Build the CLI context; explicit flags win over the configuration file."""

    paths = get_path_config(config_path)
    resolved_store_path = (
        Path(store_path).expanduser() if store_path is not None else paths["store_path"]
    )
    pipeline_cfg = get_pipeline_directory_config(config_path)
    if pipeline_url is not None:
        pipeline_cfg = PipelineDirectoryConfig(
            base_url=pipeline_url,
            timeout_seconds=pipeline_cfg.timeout_seconds,
            page_size=pipeline_cfg.page_size,
        )
    return CLIContext(
        store_path=resolved_store_path,
        db_timeout=get_default_timeout(config_path),
        db_options=get_db_options(config_path),
        pipeline_directory=pipeline_cfg,
        config_path=Path(config_path).expanduser() if config_path is not None else None,
    )
