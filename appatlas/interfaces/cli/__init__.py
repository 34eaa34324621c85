"""CLI interface facades for appatlas.

This package is the home for all Click commands.
"""

from .__main__ import cli
from .app import app

__all__ = ["app", "cli"]
