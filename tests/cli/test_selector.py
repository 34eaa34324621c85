from __future__ import annotations

import click
import pytest

from appatlas.domain.models import Application
from appatlas.interfaces.cli.selector import PromptApplicationSelector
from appatlas.services.errors import SelectionError


class _StubStore:
    def __init__(self, names, error=None):
        self._names = names
        self._error = error

    def list_applications(self):
        if self._error is not None:
            raise self._error
        return [Application(name=name) for name in self._names]


def test_single_application_is_chosen_without_prompt():
    def fail_prompt(*args, **kwargs):
        raise AssertionError("prompt should not be shown")

    selector = PromptApplicationSelector(_StubStore(["my-app"]), prompt=fail_prompt)

    assert selector.application("Which?", "Help") == "my-app"


def test_prompt_offers_known_applications():
    seen = {}

    def fake_prompt(text, **kwargs):
        seen["text"] = text
        seen["choices"] = list(kwargs["type"].choices)
        seen["err"] = kwargs["err"]
        return "other-app"

    selector = PromptApplicationSelector(
        _StubStore(["my-app", "other-app"]), prompt=fake_prompt
    )

    assert selector.application("Which?", "Help") == "other-app"
    assert seen == {"text": "Which?", "choices": ["my-app", "other-app"], "err": True}


def test_no_applications_is_selection_error():
    selector = PromptApplicationSelector(_StubStore([]))

    with pytest.raises(SelectionError, match="no applications found"):
        selector.application("Which?", "Help")


def test_aborted_prompt_is_selection_error():
    def aborting_prompt(*args, **kwargs):
        raise click.Abort()

    selector = PromptApplicationSelector(
        _StubStore(["my-app", "other-app"]), prompt=aborting_prompt
    )

    with pytest.raises(SelectionError):
        selector.application("Which?", "Help")


def test_store_failure_is_selection_error():
    selector = PromptApplicationSelector(_StubStore([], error=OSError("disk gone")))

    with pytest.raises(SelectionError, match="disk gone"):
        selector.application("Which?", "Help")
