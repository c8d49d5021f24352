import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from jobboard.config import settings
from jobboard.schemas.job import FieldError, JobInput, JobRecord

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failed API call, carrying the server's message and field errors when it sent them."""

    def __init__(self, message: str, errors: list[FieldError] | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.status_code = status_code


def _log_request(request: httpx.Request) -> None:
    logger.info("API Request: %s %s", request.method, request.url)


def _log_response(response: httpx.Response) -> None:
    logger.info("API Response: %s %s", response.status_code, response.request.url)


def _payload(fields: JobInput | Mapping[str, Any]) -> dict:
    if isinstance(fields, JobInput):
        return fields.model_dump(mode="json")
    return dict(fields)


class JobsAPI:
    """Thin wrapper over the /jobs endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        if client is None:
            client = httpx.Client(
                base_url=base_url or settings.api_base_url,
                timeout=timeout if timeout is not None else settings.api_timeout_seconds,
                headers={"Content-Type": "application/json"},
            )
        # A shared client must not end up logging every call twice.
        if _log_request not in client.event_hooks["request"]:
            client.event_hooks["request"].append(_log_request)
        if _log_response not in client.event_hooks["response"]:
            client.event_hooks["response"].append(_log_response)
        self.client = client

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "JobsAPI":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _send(self, method: str, path: str, fallback: str, json: dict | None = None) -> dict:
        try:
            response = self.client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error("API Error: %s %s: %s", method, path, e)
            raise ApiError(fallback) from e

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        if response.is_error or body.get("success") is False:
            logger.error("API Error: %s %s -> %s %s", method, path, response.status_code, body or response.text)
            try:
                errors = [FieldError.model_validate(e) for e in body.get("errors") or []]
            except ValidationError:
                errors = []
            raise ApiError(body.get("message") or fallback, errors=errors, status_code=response.status_code)
        return body

    def _record(self, body: dict, fallback: str) -> JobRecord:
        try:
            return JobRecord.model_validate(body["data"])
        except (KeyError, ValidationError) as e:
            logger.error("API Error: unreadable job in response: %s", e)
            raise ApiError(fallback) from e

    def get_all(self) -> list[JobRecord]:
        body = self._send("GET", "/jobs", "Failed to fetch jobs")
        try:
            return [JobRecord.model_validate(j) for j in body.get("data") or []]
        except ValidationError as e:
            logger.error("API Error: unreadable job list in response: %s", e)
            raise ApiError("Failed to fetch jobs") from e

    def get_by_id(self, job_id: str) -> JobRecord:
        body = self._send("GET", f"/jobs/{job_id}", "Failed to fetch job")
        return self._record(body, "Failed to fetch job")

    def create(self, fields: JobInput | Mapping[str, Any]) -> JobRecord:
        body = self._send("POST", "/jobs", "Failed to create job", json=_payload(fields))
        return self._record(body, "Failed to create job")

    def update(self, job_id: str, fields: JobInput | Mapping[str, Any]) -> JobRecord:
        body = self._send("PUT", f"/jobs/{job_id}", "Failed to update job", json=_payload(fields))
        return self._record(body, "Failed to update job")

    def delete(self, job_id: str) -> str:
        body = self._send("DELETE", f"/jobs/{job_id}", "Failed to delete job")
        return body.get("message", "")
