"""Workflow for showing one application.

:class:`ShowApplicationWorkflow` validates the requested name, asks for one
interactively when none was given, then describes, renders and writes the
application. Validation and selection never write to the output sink; the
report is rendered completely before the single write, so a failure at any
step leaves the sink untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TextIO, Union

from appatlas.infrastructure.db.repositories import ApplicationNotFoundError
from appatlas.infrastructure.observability import get_logger, log_exception
from appatlas.services.describe import ApplicationDescriber, describe_application
from appatlas.services.errors import ErrorKind, ShowAppError
from appatlas.services.interfaces import ApplicationSelector, ConfigStore
from appatlas.services.rendering import render_description

APP_SHOW_NAME_PROMPT = "Which application would you like to show?"
APP_SHOW_NAME_HELP_PROMPT = "An application is a collection of related services."

_APP_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")

_logger = get_logger(__name__)


@dataclass(frozen=True)
class Supplied:
    """An application name given by the caller or chosen by the operator."""

    name: str


@dataclass(frozen=True)
class Unresolved:
    """No application name yet; the operator will be asked for one."""


Resolution = Union[Supplied, Unresolved]


def resolution_from_flag(name: str | None) -> Resolution:
    """Map an optional command-line value to a resolution state."""
    if name is None or name == "":
        return Unresolved()
    return Supplied(name)


@dataclass(frozen=True)
class ShowAppVars:
    resolution: Resolution
    should_output_json: bool = False


class ShowApplicationWorkflow:
    """Validate → ask → execute for ``app show``.

    All collaborators are injected; the workflow never builds its own.
    """

    def __init__(
        self,
        show_vars: ShowAppVars,
        *,
        store: ConfigStore,
        selector: ApplicationSelector,
        describer: ApplicationDescriber,
        writer: TextIO,
    ) -> None:
        self.resolution: Resolution = show_vars.resolution
        self.should_output_json = show_vars.should_output_json
        self._store = store
        self._selector = selector
        self._describer = describer
        self._writer = writer

    def validate(self) -> None:
        """Check a supplied name against the store; unresolved names pass."""
        if not isinstance(self.resolution, Supplied):
            return
        name = self.resolution.name
        if not _APP_NAME_PATTERN.match(name):
            raise ShowAppError(
                ErrorKind.INVALID_INPUT,
                "validate application name",
                name,
                detail="names start with a lowercase letter and contain only "
                "lowercase letters, numbers, and hyphens",
            )
        try:
            self._store.get_application(name)
        except ApplicationNotFoundError as exc:
            raise ShowAppError(ErrorKind.INVALID_INPUT, "get application", name) from exc
        except Exception as exc:
            raise ShowAppError(ErrorKind.STORE_ACCESS, "get application", name) from exc

    def ask(self) -> None:
        """Prompt for an application when none was supplied."""
        if isinstance(self.resolution, Supplied):
            return
        try:
            name = self._selector.application(
                APP_SHOW_NAME_PROMPT, APP_SHOW_NAME_HELP_PROMPT
            )
        except Exception as exc:
            raise ShowAppError(ErrorKind.SELECTION_FAILED, "select application") from exc
        if not name:
            raise ShowAppError(
                ErrorKind.SELECTION_FAILED,
                "select application",
                detail="no application was chosen",
            )
        self.resolution = Supplied(name)

    def execute(self) -> None:
        """Describe the application and write the rendered report."""
        if not isinstance(self.resolution, Supplied):
            raise ShowAppError(
                ErrorKind.INVALID_INPUT,
                "show application",
                detail="no application name was resolved",
            )
        description = describe_application(self._describer, self.resolution.name)
        output = render_description(description, as_json=self.should_output_json)
        self._writer.write(output)

    def run(self) -> None:
        try:
            self.validate()
            self.ask()
            self.execute()
        except ShowAppError as exc:
            log_exception(
                _logger,
                "Showing application failed",
                exc,
                kind=exc.kind.value,
            )
            raise


__all__ = [
    "APP_SHOW_NAME_HELP_PROMPT",
    "APP_SHOW_NAME_PROMPT",
    "Resolution",
    "ShowAppVars",
    "ShowApplicationWorkflow",
    "Supplied",
    "Unresolved",
    "resolution_from_flag",
]
