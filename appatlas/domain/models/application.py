"""Configuration store records for applications and their resources."""

from __future__ import annotations

import json
from dataclasses import dataclass, field


def _parse_tags(value: object) -> dict[str, str]:
    if isinstance(value, dict):
        return {str(k): str(v) for k, v in value.items()}
    if isinstance(value, str) and value:
        try:
            parsed = json.loads(value)
        except (json.JSONDecodeError, TypeError):
            return {}
        if isinstance(parsed, dict):
            return {str(k): str(v) for k, v in parsed.items()}
    return {}


@dataclass
class Application:
    """A named top-level grouping of environments, services and pipelines."""

    name: str
    account_id: str = ""
    domain: str = ""
    version: str | None = None
    tags: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "Application":
        """Create an Application from a dictionary (e.g., from database row)."""
        return cls(
            name=data.get("name", ""),
            account_id=data.get("account_id") or "",
            domain=data.get("domain") or "",
            version=data.get("version"),
            tags=_parse_tags(data.get("tags")),
        )


@dataclass
class Environment:
    """A deployment target of an application.

    Besides the account/region pair and the production flag, the store keeps
    the roles and registry used to deploy into the environment.
    """

    app: str
    name: str
    account_id: str = ""
    region: str = ""
    prod: bool = False
    registry_url: str | None = None
    execution_role_arn: str | None = None
    manager_role_arn: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Environment":
        """Create an Environment from a dictionary (e.g., from database row)."""
        return cls(
            app=data.get("app", ""),
            name=data.get("name", ""),
            account_id=data.get("account_id") or "",
            region=data.get("region") or "",
            prod=bool(data.get("prod")),
            registry_url=data.get("registry_url"),
            execution_role_arn=data.get("execution_role_arn"),
            manager_role_arn=data.get("manager_role_arn"),
        )


@dataclass
class Workload:
    """A deployable unit (service or job) of an application."""

    app: str
    name: str
    type: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Workload":
        """Create a Workload from a dictionary (e.g., from database row)."""
        return cls(
            app=data.get("app", ""),
            name=data.get("name", ""),
            type=data.get("type") or "",
        )


__all__ = ["Application", "Environment", "Workload"]
