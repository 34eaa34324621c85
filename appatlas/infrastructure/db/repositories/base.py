"""Base repository class with shared database query helpers.

This module provides a base class for all repository implementations,
eliminating duplicate cursor→dict conversion logic. The configuration store
is read-only from this package, so only query helpers live here.
"""

from __future__ import annotations

import sqlite3
from typing import Any


class BaseRepository:
    """Base class for all repository implementations."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize repository with a database connection.

        Args:
            conn: SQLite database connection
        """
        self.conn = conn

    def _fetch_all_as_dicts(
        self, query: str, params: tuple[Any, ...] | None = None
    ) -> list[dict[str, Any]]:
        """Execute query and return all rows as dictionaries.

        Args:
            query: SQL query string
            params: Query parameters (optional)

        Returns:
            List of dictionaries with column names as keys

        Example:
            >>> rows = self._fetch_all_as_dicts(
            ...     "SELECT name, region FROM environments WHERE prod = ?",
            ...     (1,)
            ... )
            >>> rows[0]['name']
            'prod'
        """
        cur = self.conn.execute(query, params or ())
        columns = [c[0] for c in cur.description]
        return [dict(zip(columns, row)) for row in cur.fetchall()]

    def _fetch_one_as_dict(
        self, query: str, params: tuple[Any, ...] | None = None
    ) -> dict[str, Any] | None:
        """Execute query and return first row as dictionary.

        Args:
            query: SQL query string
            params: Query parameters (optional)

        Returns:
            Dictionary with column names as keys, or None if no rows
        """
        cur = self.conn.execute(query, params or ())
        row = cur.fetchone()
        if not row:
            return None
        columns = [c[0] for c in cur.description]
        return dict(zip(columns, row))
