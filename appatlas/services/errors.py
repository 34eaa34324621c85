"""Error taxonomy for the application description workflow."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from appatlas.infrastructure.db.repositories import ApplicationNotFoundError


class ErrorKind(str, Enum):
    """Category of a workflow failure."""

    INVALID_INPUT = "invalid_input"
    SELECTION_FAILED = "selection_failed"
    STORE_ACCESS = "store_access"
    DIRECTORY_ACCESS = "directory_access"
    RENDER_ERROR = "render_error"


class SelectionError(Exception):
    """Raised by a selector when no application could be chosen."""


class ShowAppError(Exception):
    """A whole-call failure of the workflow.

    Attributes:
        kind: Category of the failure.
        operation: The step that failed, e.g. ``"list environments in application"``.
        app_name: The application involved, if one was known at that point.

    The underlying error is chained as ``__cause__``.
    """

    def __init__(
        self,
        kind: ErrorKind,
        operation: str,
        app_name: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.kind = kind
        self.operation = operation
        self.app_name = app_name
        self.detail = detail
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        subject = f"{self.operation} {self.app_name}" if self.app_name else self.operation
        return f"{subject}: {self.detail}" if self.detail else subject

    def __str__(self) -> str:
        message = self._build_message()
        if self.detail is None and self.__cause__ is not None:
            return f"{message}: {self.__cause__}"
        return message

    @property
    def causes(self) -> Iterator[BaseException]:
        """Walk the chain of underlying errors, closest first."""
        current = self.__cause__
        while current is not None:
            yield current
            current = current.__cause__

    @property
    def is_not_found(self) -> bool:
        return any(isinstance(cause, ApplicationNotFoundError) for cause in self.causes)


__all__ = ["ErrorKind", "SelectionError", "ShowAppError"]
