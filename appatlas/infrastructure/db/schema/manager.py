from __future__ import annotations

from .tables import (
    SCHEMA_APPLICATIONS_SQL,
    SCHEMA_ENVIRONMENTS_SQL,
    SCHEMA_WORKLOADS_SQL,
)


def ensure_schema(conn) -> None:
    """Create the configuration store tables when they do not exist yet."""

    conn.executescript(SCHEMA_APPLICATIONS_SQL)
    conn.executescript(SCHEMA_ENVIRONMENTS_SQL)
    conn.executescript(SCHEMA_WORKLOADS_SQL)
