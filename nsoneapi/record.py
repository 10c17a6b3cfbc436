"""Service for the 'zones/ZONE/DOMAIN/TYPE' endpoint."""

from __future__ import annotations

from typing import Any

from .errors import APIError, RecordExistsError, RecordMissingError, ZoneMissingError


class RecordsService:
    """Reads, creates, updates and deletes DNS records.

    ``client`` must provide ``do(method, path, body=None)`` returning
    ``(data, response)`` and raising :class:`APIError` on error responses.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def get(self, zone: str, domain: str, record_type: str) -> tuple[dict, Any]:
        """Return the full configuration of a record, and the response."""
        try:
            return self._client.do("GET", _path(zone, domain, record_type))
        except APIError as err:
            _translate(err, {"record not found": RecordMissingError})
            raise

    def create(self, record: dict) -> Any:
        """Create ``record`` (which needs at least one answer) and refresh it in place."""
        path = _path(record["zone"], record["domain"], record["type"])
        try:
            data, response = self._client.do("PUT", path, record)
        except APIError as err:
            _translate(
                err,
                {"zone not found": ZoneMissingError, "record already exists": RecordExistsError},
            )
            raise
        _refresh(record, data)
        return response

    def update(self, record: dict) -> Any:
        """Modify an existing record and refresh it in place from the API's answer."""
        path = _path(record["zone"], record["domain"], record["type"])
        try:
            data, response = self._client.do("POST", path, record)
        except APIError as err:
            _translate(
                err,
                {
                    "zone not found": ZoneMissingError,
                    "record not found": RecordMissingError,
                    "record already exists": RecordExistsError,
                },
            )
            raise
        _refresh(record, data)
        return response

    def delete(self, zone: str, domain: str, record_type: str) -> Any:
        """Remove a record with all its answers and configuration."""
        try:
            _, response = self._client.do("DELETE", _path(zone, domain, record_type))
        except APIError as err:
            _translate(err, {"record not found": RecordMissingError})
            raise
        return response


def _path(zone: str, domain: str, record_type: str) -> str:
    return f"zones/{zone}/{domain}/{record_type}"


def _translate(err: APIError, known: dict[str, type]) -> None:
    error_class = known.get(err.message)
    if error_class is not None:
        raise error_class(response=err.response) from err


def _refresh(target: dict, data: Any) -> None:
    if isinstance(data, dict):
        target.update(data)