"""SQLite-backed configuration store."""

from __future__ import annotations

from appatlas.domain.models import Application, Environment, Workload
from appatlas.infrastructure.db.repositories import (
    ApplicationRepository,
    EnvironmentRepository,
    WorkloadRepository,
)

from .base import BaseService


class SqliteConfigStore(BaseService):
    """Read-only access to applications, environments and services."""

    def get_application(self, name: str) -> Application:
        self._logger.debug("Getting application %s", name)
        row = self._with_connection(lambda conn: ApplicationRepository(conn).get(name))
        return Application.from_dict(row)

    def list_applications(self) -> list[Application]:
        rows = self._with_connection(lambda conn: ApplicationRepository(conn).list())
        return [Application.from_dict(row) for row in rows]

    def list_environments(self, app_name: str) -> list[Environment]:
        rows = self._with_connection(
            lambda conn: EnvironmentRepository(conn).list_by_application(app_name)
        )
        self._logger.debug("Found %d environments for %s", len(rows), app_name)
        return [Environment.from_dict(row) for row in rows]

    def list_services(self, app_name: str) -> list[Workload]:
        rows = self._with_connection(
            lambda conn: WorkloadRepository(conn).list_by_application(app_name)
        )
        self._logger.debug("Found %d services for %s", len(rows), app_name)
        return [Workload.from_dict(row) for row in rows]
