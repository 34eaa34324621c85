"""CLI commands for inspecting applications.

This module defines an ``app`` Click group. Its ``show`` subcommand prints the
environments, services and pipelines of one application as a readable report
or as JSON.
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from appatlas.infrastructure.observability import configure_logging
from appatlas.interfaces.cli.context import build_cli_context, pipeline_directory_client
from appatlas.interfaces.cli.selector import PromptApplicationSelector
from appatlas.interfaces.cli.workspace import try_reading_app_name
from appatlas.services.describe import ApplicationDescriber
from appatlas.services.errors import ShowAppError
from appatlas.services.show_app import (
    ShowApplicationWorkflow,
    ShowAppVars,
    resolution_from_flag,
)

err_console = Console(stderr=True)


@click.group()
def app() -> None:
    """Inspect applications."""
    pass


@app.command(name="show")
@click.option(
    "-n",
    "--name",
    default=lambda: try_reading_app_name(),
    show_default="application of the current workspace",
    help="Name of the application.",
)
@click.option(
    "--json",
    "should_output_json",
    is_flag=True,
    help="Optional. Output in JSON format.",
)
@click.option("--store", "store_path", default=None, help="Path to the configuration store database.")
@click.option("--pipeline-url", default=None, help="Base URL of the pipeline directory service.")
@click.option(
    "--config",
    "config_path",
    default=None,
    envvar="APPATLAS_CONFIG",
    help="Path to the JSON configuration file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def show(
    ctx: click.Context,
    name: str | None,
    should_output_json: bool,
    store_path: str | None,
    pipeline_url: str | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Shows configuration, environments and services for an application.

    \b
    Shows info about the application "my-app"
      $ appatlas app show -n my-app
    """
    if verbose:
        configure_logging(level=logging.DEBUG)

    cli_context = build_cli_context(
        store_path=store_path, pipeline_url=pipeline_url, config_path=config_path
    )
    store = cli_context.config_store()
    with pipeline_directory_client(cli_context) as pipelines:
        workflow = ShowApplicationWorkflow(
            ShowAppVars(
                resolution=resolution_from_flag(name),
                should_output_json=should_output_json,
            ),
            store=store,
            selector=PromptApplicationSelector(store),
            describer=ApplicationDescriber(store, pipelines),
            writer=sys.stdout,
        )
        try:
            workflow.run()
        except ShowAppError as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
            ctx.exit(1)
