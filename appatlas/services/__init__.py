"""Service layer modules for appatlas."""

from .config_store import SqliteConfigStore
from .describe import APP_TAG_KEY, ApplicationDescriber, describe_application
from .dto import ApplicationDescription, EnvironmentView, WorkloadView
from .errors import ErrorKind, SelectionError, ShowAppError
from .rendering import render_description, render_human, render_json
from .show_app import (
    ShowApplicationWorkflow,
    ShowAppVars,
    Supplied,
    Unresolved,
    resolution_from_flag,
)

__all__ = [
    "APP_TAG_KEY",
    "ApplicationDescriber",
    "ApplicationDescription",
    "EnvironmentView",
    "ErrorKind",
    "SelectionError",
    "ShowAppError",
    "ShowAppVars",
    "ShowApplicationWorkflow",
    "SqliteConfigStore",
    "Supplied",
    "Unresolved",
    "WorkloadView",
    "describe_application",
    "render_description",
    "render_human",
    "render_json",
    "resolution_from_flag",
]
