from __future__ import annotations

from typing import Any

from .base import BaseRepository


class WorkloadRepository(BaseRepository):
    def list_by_application(self, app_name: str) -> list[dict[str, Any]]:
        """Return the services of an application in insertion order."""
        return self._fetch_all_as_dicts(
            """
            SELECT a.name AS app, w.name, w.type
            FROM workloads w
            JOIN applications a ON w.app_id = a.id
            WHERE a.name = ?
            ORDER BY w.id
            """,
            (app_name,),
        )
