"""HTTP adapters for appatlas.

This package provides the client for the pipeline directory service.
"""

from .client import (
    Pipeline,
    PipelineDirectoryClient,
    PipelineDirectoryError,
    PipelineDirectoryTimeoutError,
)

__all__ = [
    "Pipeline",
    "PipelineDirectoryClient",
    "PipelineDirectoryError",
    "PipelineDirectoryTimeoutError",
]
