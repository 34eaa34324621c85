from __future__ import annotations

import json

import pytest
import requests
from requests import Response

from appatlas.infrastructure.http import (
    PipelineDirectoryClient,
    PipelineDirectoryError,
    PipelineDirectoryTimeoutError,
)


def _make_response(body, status: int = 200) -> Response:
    resp = Response()
    resp._content = (body if isinstance(body, str) else json.dumps(body)).encode("utf-8")
    resp.status_code = status
    resp.url = "http://pipelines.test/pipelines"
    resp.headers["Content-Type"] = "application/json"
    return resp


class _FakeSession:
    def __init__(self, responses):
        self._responses = list(responses)
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        outcome = self._responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _client(session: _FakeSession) -> PipelineDirectoryClient:
    return PipelineDirectoryClient(
        base_url="http://pipelines.test/",
        timeout_seconds=3.0,
        page_size=2,
        session=session,
    )


def test_find_pipelines_follows_pagination() -> None:
    session = _FakeSession(
        [
            _make_response(
                {
                    "pipelines": [
                        {"pipelineName": "pipeline-my-app-a", "region": "us-west-2"},
                        {"pipelineName": "pipeline-my-app-b", "region": "us-west-2"},
                    ],
                    "nextToken": "page-2",
                }
            ),
            _make_response(
                {
                    "pipelines": [{"pipelineName": "pipeline-my-app-c"}],
                    "nextToken": None,
                }
            ),
        ]
    )

    pipelines = _client(session).find_pipelines_by_tag("application", "my-app")

    assert [p.name for p in pipelines] == [
        "pipeline-my-app-a",
        "pipeline-my-app-b",
        "pipeline-my-app-c",
    ]
    assert session.requests[0] == {
        "url": "http://pipelines.test/pipelines",
        "params": {"tagKey": "application", "tagValue": "my-app", "maxResults": 2},
        "timeout": 3.0,
    }
    assert session.requests[1]["params"]["nextToken"] == "page-2"


def test_empty_result_is_valid() -> None:
    session = _FakeSession([_make_response({"pipelines": []})])

    assert _client(session).find_pipelines_by_tag("application", "my-app") == []


def test_unknown_fields_are_kept() -> None:
    session = _FakeSession(
        [
            _make_response(
                {
                    "pipelines": [
                        {
                            "pipelineName": "pipeline-my-app",
                            "accountId": "111111111111",
                            "stages": [{"name": "Source"}],
                            "executionMode": "QUEUED",
                        }
                    ]
                }
            )
        ]
    )

    (pipeline,) = _client(session).find_pipelines_by_tag("application", "my-app")

    assert pipeline.account_id == "111111111111"
    assert pipeline.model_dump(by_alias=True)["executionMode"] == "QUEUED"


def test_error_status_raises() -> None:
    session = _FakeSession([_make_response({"message": "unavailable"}, status=503)])

    with pytest.raises(PipelineDirectoryError, match="503"):
        _client(session).find_pipelines_by_tag("application", "my-app")


def test_timeout_raises_timeout_error() -> None:
    session = _FakeSession([requests.Timeout("read timed out")])

    with pytest.raises(PipelineDirectoryTimeoutError) as excinfo:
        _client(session).find_pipelines_by_tag("application", "my-app")

    assert isinstance(excinfo.value, TimeoutError)


def test_connection_error_raises() -> None:
    session = _FakeSession([requests.ConnectionError("connection refused")])

    with pytest.raises(PipelineDirectoryError, match="connection refused"):
        _client(session).find_pipelines_by_tag("application", "my-app")


def test_invalid_json_raises() -> None:
    session = _FakeSession([_make_response("<html>oops</html>")])

    with pytest.raises(PipelineDirectoryError, match="invalid JSON"):
        _client(session).find_pipelines_by_tag("application", "my-app")


def test_record_without_name_raises() -> None:
    session = _FakeSession([_make_response({"pipelines": [{"region": "us-west-2"}]})])

    with pytest.raises(PipelineDirectoryError, match="malformed pipeline record"):
        _client(session).find_pipelines_by_tag("application", "my-app")
