"""Service for the DHCP 'scope group' endpoints."""

from __future__ import annotations

from typing import Any

_ENDPOINT = "dhcp/scopegroup"


class ScopeGroupService:
    """Lists, reads, creates, edits and deletes DHCP scope groups.

    ``client`` must provide ``do(method, path, body=None)`` returning
    ``(data, response)`` and raising an API error on error responses.
    Scope groups are dicts holding a ``name`` and, once created, an ``id``.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def list(self) -> tuple[list[dict], Any]:
        """Return every scope group, and the response."""
        data, response = self._client.do("GET", _ENDPOINT)
        return list(data or []), response

    def get(self, group_id: int) -> tuple[dict, Any]:
        """Return the scope group with the given ID, and the response."""
        data, response = self._client.do("GET", f"{_ENDPOINT}/{int(group_id)}")
        return dict(data or {}), response

    def create(self, group: dict) -> tuple[dict, Any]:
        """Create a scope group; a non-empty ``name`` is required.

        Returns the group as the API stored it, and the response.
        """
        if not group.get("name"):
            raise ValueError("the Name field is required")
        data, response = self._client.do("PUT", _ENDPOINT, group)
        return dict(data or {}), response

    def edit(self, group: dict) -> tuple[dict, Any]:
        """Update an existing scope group; ``id`` is required.

        The given dict is refreshed in place from the API's answer and returned.
        """
        if group.get("id") is None:
            raise ValueError("the ID field is required")
        data, response = self._client.do("POST", f"{_ENDPOINT}/{int(group['id'])}", group)
        if isinstance(data, dict):
            group.update(data)
        return group, response

    def delete(self, group_id: int) -> Any:
        """Remove a scope group entirely and return the response."""
        _, response = self._client.do("DELETE", f"{_ENDPOINT}/{int(group_id)}")
        return response