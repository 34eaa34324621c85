"""Entry point for running the appatlas CLI.

This module defines the top-level Click group that aggregates all command
groups defined in the ``appatlas.interfaces.cli`` package. Executing
``python -m appatlas.interfaces.cli`` will invoke this group and present the
available commands.
"""

import click

from appatlas import __version__

from .app import app


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="appatlas")
def cli() -> None:
    """appatlas command-line interface."""


cli.add_command(app)


if __name__ == "__main__":
    cli()
