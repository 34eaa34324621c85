"""HTTP client for the pipeline directory service.

The pipeline directory indexes deployment pipelines by their resource tags.
This module wraps its JSON API behind :class:`PipelineDirectoryClient`, which
maintains a :class:`requests.Session`, applies the configured request timeout
and follows ``nextToken`` pagination until every page has been read.

Every failure (transport error, timeout, non-2xx status, malformed body) is
raised as :class:`PipelineDirectoryError`; nothing is retried here.
"""

from __future__ import annotations

from typing import Any

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from requests import Response, Session

from appatlas.infrastructure.observability import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
PIPELINES_PATH = "/pipelines"


class PipelineDirectoryError(Exception):
    """Raised when the pipeline directory cannot be queried."""


class PipelineDirectoryTimeoutError(PipelineDirectoryError, TimeoutError):
    """Raised when the pipeline directory does not answer in time."""


class Pipeline(BaseModel):
    """Deployment pipeline record as returned by the directory.

    Fields the directory adds beyond the known ones are kept untouched so the
    record can be passed through as-is.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    name: str = Field(alias="pipelineName")
    region: str = ""
    account_id: str = Field(default="", alias="accountId")
    stages: list[dict[str, Any]] = Field(default_factory=list)
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class PipelineDirectoryClient:
    """Tag-based pipeline lookups against the pipeline directory service."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
        page_size: int = 50,
        session: Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.page_size = page_size
        self.session = session or requests.Session()

    def find_pipelines_by_tag(self, tag_key: str, tag_value: str) -> list[Pipeline]:
        """Return every pipeline whose ``tag_key`` tag equals ``tag_value``."""

        pipelines: list[Pipeline] = []
        next_token: str | None = None
        while True:
            payload = self._fetch_page(tag_key, tag_value, next_token)
            pipelines.extend(self._parse_pipelines(payload))
            next_token = payload.get("nextToken") or None
            if next_token is None:
                break
        logger.debug(
            "Found %d pipelines tagged %s=%s", len(pipelines), tag_key, tag_value
        )
        return pipelines

    # -------------------- request helpers --------------------
    def _fetch_page(
        self, tag_key: str, tag_value: str, next_token: str | None
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "tagKey": tag_key,
            "tagValue": tag_value,
            "maxResults": self.page_size,
        }
        if next_token:
            params["nextToken"] = next_token
        url = f"{self.base_url}{PIPELINES_PATH}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
        except requests.Timeout as exc:
            raise PipelineDirectoryTimeoutError(
                f"request to {url} timed out after {self.timeout_seconds}s"
            ) from exc
        except requests.RequestException as exc:
            raise PipelineDirectoryError(f"request to {url} failed: {exc}") from exc
        return self._decode(response)

    def _decode(self, response: Response) -> dict[str, Any]:
        if not 200 <= response.status_code < 300:
            raise PipelineDirectoryError(
                f"unexpected status {response.status_code} from {response.url}"
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise PipelineDirectoryError(
                f"invalid JSON from {response.url}: {exc}"
            ) from exc
        if not isinstance(payload, dict):
            raise PipelineDirectoryError(
                f"unexpected response body from {response.url}"
            )
        return payload

    def _parse_pipelines(self, payload: dict[str, Any]) -> list[Pipeline]:
        records = payload.get("pipelines") or []
        if not isinstance(records, list):
            raise PipelineDirectoryError("'pipelines' is not a list")
        try:
            return [Pipeline.model_validate(record) for record in records]
        except ValidationError as exc:
            raise PipelineDirectoryError(f"malformed pipeline record: {exc}") from exc
