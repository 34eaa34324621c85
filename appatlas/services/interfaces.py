"""Typed collaborator contracts consumed by the description workflow."""

from __future__ import annotations

from typing import Protocol, Sequence

from appatlas.domain.models import Application, Environment, Workload
from appatlas.infrastructure.http import Pipeline


class ConfigStore(Protocol):
    """Read-only accessor for application configuration records."""

    def get_application(self, name: str) -> Application:
        """Return the application record.

        Raises:
            ApplicationNotFoundError: Raised when no application has this name.
        """

    def list_applications(self) -> Sequence[Application]:
        """Return every application known to the store."""

    def list_environments(self, app_name: str) -> Sequence[Environment]:
        """Return the environments of an application, possibly empty."""

    def list_services(self, app_name: str) -> Sequence[Workload]:
        """Return the services of an application, possibly empty."""


class PipelineDirectory(Protocol):
    """Lookup of deployment pipelines by resource tag."""

    def find_pipelines_by_tag(self, tag_key: str, tag_value: str) -> Sequence[Pipeline]:
        """Return the pipelines tagged ``tag_key=tag_value``, possibly empty."""


class ApplicationSelector(Protocol):
    """Interactive choice of one application from the known set."""

    def application(self, prompt: str, help_text: str) -> str:
        """Return the chosen application name.

        Raises:
            SelectionError: Raised when no application could be chosen.
        """
