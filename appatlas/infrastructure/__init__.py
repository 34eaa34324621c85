"""Infrastructure layer for appatlas.

Holds the adapters for the configuration store (SQLite), the pipeline
directory (HTTP) and observability helpers.
"""

from . import db, http, observability

__all__ = ["db", "http", "observability"]
