from __future__ import annotations

SCHEMA_APPLICATIONS_SQL = """
CREATE TABLE IF NOT EXISTS applications (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    account_id TEXT,
    domain TEXT,
    version TEXT,
    tags TEXT
);
"""

SCHEMA_ENVIRONMENTS_SQL = """
CREATE TABLE IF NOT EXISTS environments (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    app_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    account_id TEXT,
    region TEXT,
    prod INTEGER NOT NULL DEFAULT 0,
    registry_url TEXT,
    execution_role_arn TEXT,
    manager_role_arn TEXT,
    FOREIGN KEY (app_id) REFERENCES applications (id) ON DELETE CASCADE,
    UNIQUE (app_id, name)
);
CREATE INDEX IF NOT EXISTS idx_environments_app_id ON environments (app_id);
"""

SCHEMA_WORKLOADS_SQL = """
CREATE TABLE IF NOT EXISTS workloads (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    app_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    type TEXT,
    FOREIGN KEY (app_id) REFERENCES applications (id) ON DELETE CASCADE,
    UNIQUE (app_id, name)
);
CREATE INDEX IF NOT EXISTS idx_workloads_app_id ON workloads (app_id);
"""
