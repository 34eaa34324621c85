"""Base service class with shared connection and infrastructure patterns.

This module provides a base class for service layer implementations,
standardizing connection management, logging, and schema initialization.
"""

from __future__ import annotations

import sqlite3
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Callable, TypeVar

from appatlas.infrastructure.db import ensure_schema, get_connection
from appatlas.infrastructure.observability import get_logger

ConnectionFactory = Callable[[], AbstractContextManager[sqlite3.Connection]]
T = TypeVar("T")
ServiceT = TypeVar("ServiceT", bound="BaseService")


class BaseService:
    """Base class for SQLite-backed service implementations.

    Provides shared infrastructure for:
    - Connection factory pattern (dependency injection for testing)
    - Automatic schema initialization
    - Consistent logging setup

    Every call opens its own connection, so a service instance can be used
    from worker threads without sharing a ``sqlite3.Connection``.

    Example usage:
        class MyService(BaseService):
            def count(self) -> int:
                return self._with_connection(
                    lambda conn: conn.execute("SELECT COUNT(*) FROM applications").fetchone()[0]
                )

        # Production usage:
        service = MyService.from_sqlite_path("/path/to/store.db")

        # Test usage with a custom factory:
        service = MyService(connection_factory)
    """

    def __init__(self, connection_factory: ConnectionFactory) -> None:
        """Initialize service with a connection factory.

        Args:
            connection_factory: Callable returning a context manager that yields
                               a sqlite3.Connection
        """
        self._connection_factory = connection_factory
        self._logger = get_logger(self.__class__.__module__)

    @classmethod
    def from_sqlite_path(
        cls: type[ServiceT],
        db_path: str | Path,
        *,
        timeout: float | None = None,
        enable_wal: bool | None = None,
        foreign_keys: bool | None = None,
        must_exist: bool = False,
        config_path: str | Path | None = None,
    ) -> ServiceT:
        """Create a service bound to a SQLite database path.

        This is the standard factory method for production usage.

        Args:
            db_path: Path to the SQLite database file
            timeout: Busy timeout in seconds; the configured default when None
            enable_wal: Journal in WAL mode; the configured default when None
            foreign_keys: Enforce foreign keys; the configured default when None
            must_exist: Fail instead of creating a missing database file
            config_path: Configuration file for settings left as None

        Returns:
            Service instance configured to use the specified database
        """

        def connection_factory() -> AbstractContextManager[sqlite3.Connection]:
            return get_connection(
                db_path,
                timeout=timeout,
                enable_wal=enable_wal,
                foreign_keys=foreign_keys,
                must_exist=must_exist,
                config_path=config_path,
            )

        return cls(connection_factory)

    def _with_connection(self, fn: Callable[[sqlite3.Connection], T]) -> T:
        """Execute a function within a database connection context.

        Automatically ensures the schema is initialized before executing
        the provided function.

        Args:
            fn: Function that takes a connection and returns a result

        Returns:
            The result of the provided function
        """
        with self._connection_factory() as conn:
            ensure_schema(conn)
            return fn(conn)
