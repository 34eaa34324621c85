"""
Output models for the application description workflow.

Environments and services are projected down to a fixed field set before they
reach the renderers. The view models forbid extra fields, so full store
records cannot leak into the rendered output.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from appatlas.domain.models import Environment, Workload
from appatlas.infrastructure.http import Pipeline


class EnvironmentView(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str
    account_id: str = Field(alias="accountID")
    region: str
    prod: bool = False

    @classmethod
    def from_record(cls, env: Environment) -> "EnvironmentView":
        return cls(
            name=env.name,
            account_id=env.account_id,
            region=env.region,
            prod=env.prod,
        )


class WorkloadView(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    type: str

    @classmethod
    def from_record(cls, workload: Workload) -> "WorkloadView":
        return cls(name=workload.name, type=workload.type)


class ApplicationDescription(BaseModel):
    """Canonical description of one application, built once per invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str
    uri: str = Field(default="", description="Custom domain, empty when none is set.")
    environments: list[EnvironmentView] = Field(default_factory=list)
    workloads: list[WorkloadView] = Field(default_factory=list, alias="services")
    pipelines: list[Pipeline] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready document with its external key names."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["ApplicationDescription", "EnvironmentView", "WorkloadView"]
