"""Service for the 'pulsar/apps/APPID/jobs/JOBID' endpoint."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from .errors import AppMissingError, JobMissingError
from .zone import _request

_APP_MISSING = {HTTPStatus.NOT_FOUND: AppMissingError}


def _job_path(app_id: str, job_id: str) -> str:
    return f"pulsar/apps/{app_id}/jobs/{job_id}"


def _job_errors(app_id: str, job_id: str) -> dict:
    return {
        f"pulsar job {job_id} not found for appid {app_id}": JobMissingError,
        "pulsar app not found": AppMissingError,
    }


class PulsarJobsService:
    """Lists, reads, creates, updates and deletes Pulsar jobs.

    ``client`` must provide ``do(method, path, body=None)`` returning
    ``(data, response)`` and raising an API error on error responses.
    Jobs are dicts holding at least ``appid`` and, once created, ``jobid``.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def list(self, app_id: str) -> tuple[list[dict], Any]:
        """Return every job inside an application, and the response."""
        data, response = _request(
            self._client, "GET", f"pulsar/apps/{app_id}/jobs", errors=_APP_MISSING
        )
        return list(data or []), response

    def get(self, app_id: str, job_id: str) -> tuple[dict, Any]:
        """Return the full configuration of one job, and the response."""
        return _request(
            self._client, "GET", _job_path(app_id, job_id), errors=_job_errors(app_id, job_id)
        )

    def create(self, job: dict) -> Any:
        """Create ``job`` in its application and refresh it in place."""
        path = f"pulsar/apps/{job['appid']}/jobs"
        return _request(self._client, "PUT", path, job, _APP_MISSING)[1]

    def update(self, job: dict) -> Any:
        """Modify an existing job and refresh it in place from the API's answer."""
        return self._on_job("POST", job, job)

    def delete(self, job: dict) -> Any:
        """Remove an existing job."""
        return self._on_job("DELETE", job)

    def _on_job(self, method: str, job: dict, body: Any = None) -> Any:
        app_id, job_id = job["appid"], job["jobid"]
        path = _job_path(app_id, job_id)
        return _request(self._client, method, path, body, _job_errors(app_id, job_id))[1]