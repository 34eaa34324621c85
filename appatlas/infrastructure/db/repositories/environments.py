from __future__ import annotations

from typing import Any

from .base import BaseRepository


class EnvironmentRepository(BaseRepository):
    def list_by_application(self, app_name: str) -> list[dict[str, Any]]:
        """Return the environments of an application in insertion order."""
        return self._fetch_all_as_dicts(
            """
            SELECT a.name AS app, e.name, e.account_id, e.region, e.prod,
                   e.registry_url, e.execution_role_arn, e.manager_role_arn
            FROM environments e
            JOIN applications a ON e.app_id = a.id
            WHERE a.name = ?
            ORDER BY e.id
            """,
            (app_name,),
        )
