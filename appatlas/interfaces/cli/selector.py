"""Interactive application selection for CLI commands."""

from __future__ import annotations

from typing import Callable

import click

from appatlas.infrastructure.observability import get_logger
from appatlas.services.errors import SelectionError
from appatlas.services.interfaces import ConfigStore

_logger = get_logger(__name__)


class PromptApplicationSelector:
    """Let the operator pick one application known to the store.

    Prompts are written to stderr so stdout only ever carries the report.
    """

    def __init__(
        self, store: ConfigStore, prompt: Callable[..., str] = click.prompt
    ) -> None:
        self._store = store
        self._prompt = prompt

    def application(self, prompt: str, help_text: str) -> str:
        try:
            names = [app.name for app in self._store.list_applications()]
        except Exception as exc:
            raise SelectionError(f"list applications: {exc}") from exc
        if not names:
            raise SelectionError(
                "no applications found; run this command from a workspace "
                "or create an application first"
            )
        if len(names) == 1:
            click.echo(
                f"Only found one application, defaulting to: {names[0]}", err=True
            )
            return names[0]

        click.echo(help_text, err=True)
        try:
            selection = self._prompt(
                prompt,
                type=click.Choice(names),
                show_choices=True,
                err=True,
            )
        except click.Abort as exc:
            raise SelectionError("application selection was aborted") from exc
        _logger.debug("Operator selected application %s", selection)
        return selection
