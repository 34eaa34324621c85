"""Application-level configuration for appatlas."""

from .config import (
    DEFAULT_DB_TIMEOUT,
    PipelineDirectoryConfig,
    get_db_options,
    get_default_timeout,
    get_path_config,
    get_pipeline_directory_config,
    load_config,
)

__all__ = [
    "DEFAULT_DB_TIMEOUT",
    "PipelineDirectoryConfig",
    "get_db_options",
    "get_default_timeout",
    "get_path_config",
    "get_pipeline_directory_config",
    "load_config",
]
