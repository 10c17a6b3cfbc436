"""Service for the DHCP 'scope' endpoints."""

from __future__ import annotations

from typing import Any

_ENDPOINT = "dhcp/scope"


def _require_address(scope: dict) -> None:
    if scope.get("address_id") is None:
        raise ValueError("the IDAddress field is required")


class ScopeService:
    """Lists, reads, creates, edits and deletes DHCP scopes.

    ``client`` must provide ``do(method, path, body=None)`` returning
    ``(data, response)`` and raising an API error on error responses.
    Scopes are dicts; ``address_id`` names the address the scope covers.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def list(self) -> tuple[list[dict], Any]:
        """Return every scope, and the response."""
        data, response = self._client.do("GET", _ENDPOINT)
        return list(data or []), response

    def get(self, scope_id: int) -> tuple[dict, Any]:
        """Return the scope with the given ID, and the response."""
        return self._call("GET", scope_id)

    def create(self, scope: dict) -> tuple[dict, Any]:
        """Create a scope; its ``address_id`` field is required.

        Returns the scope as the API stored it, and the response.
        """
        _require_address(scope)
        return self._call("PUT", None, scope)

    def edit(self, scope: dict) -> tuple[dict, Any]:
        """Update an existing scope; ``address_id`` is required.

        A scope without ``id`` is sent to ID 0. The given dict is refreshed
        in place from the API's answer and returned.
        """
        _require_address(scope)
        data, response = self._call("POST", scope.get("id") or 0, scope)
        scope.update(data)
        return scope, response

    def delete(self, scope_id: int) -> Any:
        """Remove a scope entirely and return the response."""
        return self._call("DELETE", scope_id)[1]

    def _call(self, method: str, scope_id: int | None, body: Any = None) -> tuple[dict, Any]:
        path = _ENDPOINT if scope_id is None else f"{_ENDPOINT}/{int(scope_id)}"
        data, response = self._client.do(method, path, body)
        return (dict(data) if isinstance(data, dict) else {}), response