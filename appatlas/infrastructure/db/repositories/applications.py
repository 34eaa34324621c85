from __future__ import annotations

from typing import Any

from .base import BaseRepository


class ApplicationNotFoundError(LookupError):
    """Raised when an application name is not present in the store."""

    def __init__(self, name: str) -> None:
        super().__init__(f"application {name} not found")
        self.name = name


class ApplicationRepository(BaseRepository):
    def get(self, name: str) -> dict[str, Any]:
        row = self._fetch_one_as_dict(
            "SELECT name, account_id, domain, version, tags "
            "FROM applications WHERE name = ?",
            (name,),
        )
        if row is None:
            raise ApplicationNotFoundError(name)
        return row

    def list(self) -> list[dict[str, Any]]:
        return self._fetch_all_as_dicts(
            "SELECT name, account_id, domain, version, tags "
            "FROM applications ORDER BY name"
        )
