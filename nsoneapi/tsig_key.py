"""Service for the 'tsig' endpoint."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from .errors import TsigKeyExistsError, TsigKeyMissingError
from .zone import _request

_MISSING = {HTTPStatus.NOT_FOUND: TsigKeyMissingError}
_EXISTS = {HTTPStatus.CONFLICT: TsigKeyExistsError}


class TsigService:
    """Lists, reads, creates, updates and deletes TSIG keys.

    ``client`` must provide ``do(method, path, body=None)`` returning
    ``(data, response)`` and raising an API error on error responses.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def list(self) -> tuple[list[dict], Any]:
        """Return every TSIG key with its basic configuration, and the response."""
        data, response = _request(self._client, "GET", "tsig")
        return list(data or []), response

    def get(self, name: str) -> tuple[dict, Any]:
        """Return one TSIG key with its basic configuration, and the response."""
        return _request(self._client, "GET", f"tsig/{name}", errors=_MISSING)

    def create(self, key: dict) -> Any:
        """Create ``key`` and refresh it in place from the API's answer."""
        return _request(self._client, "PUT", f"tsig/{key['name']}", key, _EXISTS)[1]

    def update(self, key: dict) -> Any:
        """Modify an existing TSIG key and refresh it in place from the API's answer."""
        return _request(self._client, "POST", f"tsig/{key['name']}", key, _MISSING)[1]

    def delete(self, name: str) -> Any:
        """Destroy an existing TSIG key."""
        return _request(self._client, "DELETE", f"tsig/{name}", errors=_MISSING)[1]