"""Service for the 'zones' endpoint, with the request helpers the services share."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping

from .errors import APIError, ZoneExistsError, ZoneMissingError

_ZONE_MISSING = {"zone not found": ZoneMissingError}


@contextmanager
def _mapped_errors(mapping: Mapping[Any, type] | None) -> Iterator[None]:
    """Turn an :class:`APIError` into the class its message or status code maps to."""
    try:
        yield
    except APIError as err:
        table = mapping or {}
        replacement = table.get(err.message) or table.get(err.status_code)
        if replacement is None:
            raise
        raise replacement(response=err.response) from err


def _request(
    client: Any,
    method: str,
    path: str,
    body: Any = None,
    errors: Mapping[Any, type] | None = None,
) -> tuple[Any, Any]:
    """Send one request; a dict body is refreshed in place from a dict answer."""
    with _mapped_errors(errors):
        data, response = client.do(method, path, body)
    if isinstance(body, dict) and isinstance(data, dict):
        body.update(data)
    return data, response


def _checked(value: Any, kind: type, name: str) -> Any:
    if not isinstance(value, kind):
        raise TypeError(
            f"incorrect value for {name}, expected a {kind.__name__}, got: {type(value).__name__}"
        )
    return value


class ZonesService:
    """Lists, reads, creates, updates and deletes DNS zones.

    ``client`` must provide ``do(method, path, body=None)``,
    ``do_with_pagination(method, path, next_page)``, ``get_uri(uri)`` (each
    returning ``(data, response)`` and raising :class:`APIError` on error
    responses) and a ``follow_pagination`` flag.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def list(self) -> tuple[list[dict], Any]:
        """Return all active zones with their basic configuration, and the response."""
        data, response = self._fetch("zones", self._next_zones)
        return list(data or []), response

    def get(self, zone: str) -> tuple[dict, Any]:
        """Return one zone with its configuration and records, and the response."""
        with _mapped_errors(_ZONE_MISSING):
            return self._fetch(f"zones/{zone}", self._next_records)

    def create(self, zone: dict) -> Any:
        """Create ``zone`` and refresh it in place from the API's answer."""
        errors = {"zone already exists": ZoneExistsError}
        return _request(self._client, "PUT", f"zones/{zone['zone']}", zone, errors)[1]

    def update(self, zone: dict) -> Any:
        """Modify an existing zone and refresh it in place from the API's answer."""
        return _request(self._client, "POST", f"zones/{zone['zone']}", zone, _ZONE_MISSING)[1]

    def delete(self, zone: str) -> Any:
        """Destroy a zone and every record in it."""
        return _request(self._client, "DELETE", f"zones/{zone}", errors=_ZONE_MISSING)[1]

    def _fetch(self, path: str, next_page: Any) -> tuple[Any, Any]:
        if self._client.follow_pagination:
            return self._client.do_with_pagination("GET", path, next_page)
        return self._client.do("GET", path)

    def _next_zones(self, zones: Any, uri: str) -> tuple[list[dict], Any]:
        page, response = self._client.get_uri(uri)
        return [*_checked(zones, list, "zones"), *(page or [])], response

    def _next_records(self, zone: Any, uri: str) -> tuple[dict, Any]:
        page, response = self._client.get_uri(uri)
        zone = _checked(zone, dict, "zone")
        # Apart from its records, a later page repeats the zone unchanged.
        records = [*(zone.get("records") or []), *((page or {}).get("records") or [])]
        return {**zone, "records": records}, response