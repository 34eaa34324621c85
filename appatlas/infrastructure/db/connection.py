from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from appatlas.app.config import get_db_options, get_default_timeout, get_path_config


class DatabaseError(Exception):
    """Custom exception for database connection errors."""


def apply_pragmas(
    conn: sqlite3.Connection,
    *,
    enable_wal: bool = True,
    foreign_keys: bool = True,
    busy_timeout_ms: int | None = None,
) -> None:
    """Apply the SQLite PRAGMAs used by the configuration store."""

    try:
        if enable_wal:
            conn.execute("PRAGMA journal_mode=WAL;")
        if foreign_keys:
            conn.execute("PRAGMA foreign_keys=ON;")
        if busy_timeout_ms is not None:
            conn.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)};")
    except sqlite3.Error as exc:
        raise DatabaseError(f"Failed to apply PRAGMAs: {exc}") from exc


@contextmanager
def get_connection(
    db_path: str | Path | None = None,
    *,
    timeout: float | None = None,
    enable_wal: bool | None = None,
    foreign_keys: bool | None = None,
    must_exist: bool = False,
    config_path: str | Path | None = None,
) -> Iterator[sqlite3.Connection]:
    """Yield a configured SQLite connection.

    Settings left as ``None`` are read from the configuration file at
    ``config_path``. With ``must_exist`` a missing database file raises
    :class:`DatabaseError` instead of being created.
    """

    resolved_db_path = (
        Path(db_path) if db_path is not None else get_path_config(config_path)["store_path"]
    )
    if must_exist:
        if not resolved_db_path.is_file():
            raise DatabaseError(f"database {resolved_db_path} does not exist")
    else:
        resolved_db_path.parent.mkdir(parents=True, exist_ok=True)
    timeout_value = timeout if timeout is not None else get_default_timeout(config_path)
    if enable_wal is None or foreign_keys is None:
        db_options = get_db_options(config_path)
        if enable_wal is None:
            enable_wal = db_options["enable_wal"]
        if foreign_keys is None:
            foreign_keys = db_options["foreign_keys"]
    try:
        conn = sqlite3.connect(resolved_db_path, timeout=timeout_value)
    except sqlite3.Error as exc:
        raise DatabaseError(f"Failed to connect to database: {exc}") from exc
    try:
        apply_pragmas(
            conn,
            enable_wal=enable_wal,
            foreign_keys=foreign_keys,
            busy_timeout_ms=int(timeout_value * 1000),
        )
        yield conn
    finally:
        conn.close()
