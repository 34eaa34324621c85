from __future__ import annotations

import json

import pytest

from appatlas.infrastructure.http import Pipeline
from appatlas.services.dto import ApplicationDescription, EnvironmentView, WorkloadView
from appatlas.services.errors import ErrorKind, ShowAppError
from appatlas.services.rendering import (
    NONE_MARKER,
    render_description,
    render_human,
    render_json,
)


def _description(**overrides) -> ApplicationDescription:
    fields = {
        "name": "my-app",
        "uri": "",
        "environments": [
            EnvironmentView(
                name="test", account_id="111111111111", region="us-west-2", prod=False
            )
        ],
        "workloads": [WorkloadView(name="api", type="Load Balanced Web Service")],
        "pipelines": [
            Pipeline.model_validate(
                {"pipelineName": "pipeline-my-app", "region": "us-west-2"}
            )
        ],
    }
    fields.update(overrides)
    return ApplicationDescription(**fields)


EXPECTED_HUMAN = """\
About

  Name    my-app
  URI     None

Environments

  Name    AccountID       Region       Production
  ----    ---------       ------       ----------
  test    111111111111    us-west-2    no

Services

  Name    Type
  ----    ----
  api     Load Balanced Web Service

Pipelines

  Name
  ----
  pipeline-my-app
"""


def test_human_report_snapshot():
    assert render_human(_description()) == EXPECTED_HUMAN


def test_human_report_is_stable():
    description = _description()

    assert render_human(description) == render_human(description)


def test_human_report_marks_production_and_domain():
    description = _description(
        uri="example.com",
        environments=[
            EnvironmentView(name="prod", account_id="2", region="eu-west-1", prod=True)
        ],
    )

    output = render_human(description)

    assert "  URI     example.com" in output
    assert "  prod    2            eu-west-1    yes" in output


def test_human_report_keeps_empty_sections():
    description = _description(environments=[], workloads=[], pipelines=[])

    output = render_human(description)

    for section in ("About", "Environments", "Services", "Pipelines"):
        assert f"\n{section}\n" in f"\n{output}"
    assert f"URI     {NONE_MARKER}" in output


def test_json_document_keys_and_uri():
    payload = json.loads(render_json(_description()))

    assert list(payload) == ["name", "uri", "environments", "services", "pipelines"]
    assert payload["uri"] == ""
    assert list(payload["environments"][0]) == ["name", "accountID", "region", "prod"]
    assert list(payload["services"][0]) == ["name", "type"]


def test_json_document_ends_with_newline():
    assert render_json(_description()).endswith("}\n")


def test_pipeline_records_pass_through_unmodified():
    pipeline = Pipeline.model_validate(
        {
            "pipelineName": "pipeline-my-app",
            "region": "us-west-2",
            "stages": [{"name": "Source"}, {"name": "Build"}],
            "executionMode": "QUEUED",
        }
    )

    payload = json.loads(render_json(_description(pipelines=[pipeline])))

    rendered = payload["pipelines"][0]
    assert rendered["stages"] == [{"name": "Source"}, {"name": "Build"}]
    assert rendered["executionMode"] == "QUEUED"


def test_both_formats_describe_the_same_resources():
    description = _description()

    human = render_human(description)
    payload = json.loads(render_json(description))

    for env in payload["environments"]:
        assert env["name"] in human and env["accountID"] in human
    for svc in payload["services"]:
        assert svc["name"] in human and svc["type"] in human
    for pipeline in payload["pipelines"]:
        assert pipeline["pipelineName"] in human


def test_rendering_does_not_mutate_description():
    description = _description()
    before = description.model_dump()

    render_human(description)
    render_json(description)

    assert description.model_dump() == before


def test_unserializable_pipeline_raises_render_error():
    pipeline = Pipeline.model_validate({"pipelineName": "broken", "handle": object()})

    with pytest.raises(ShowAppError) as excinfo:
        render_json(_description(pipelines=[pipeline]))

    assert excinfo.value.kind is ErrorKind.RENDER_ERROR
    assert excinfo.value.app_name == "my-app"


def test_render_description_selects_mode():
    description = _description()

    assert render_description(description, as_json=False) == render_human(description)
    assert render_description(description, as_json=True) == render_json(description)
