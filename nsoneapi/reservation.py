"""Service for the DHCP 'reservation' endpoints."""

from __future__ import annotations

from typing import Any

_ENDPOINT = "dhcp/reservation"


class ReservationService:
    """Lists, reads, creates, edits and deletes DHCP reservations.

    ``client`` must provide ``do(method, path, body=None)`` returning
    ``(data, response)`` and raising an API error on error responses.
    Reservations are dicts; ``id`` identifies an existing reservation and
    ``options`` holds its DHCP options.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def list(self) -> tuple[list[dict], Any]:
        """Return every reservation, and the response."""
        data, response = self._client.do("GET", _ENDPOINT)
        return list(data or []), response

    def get(self, reservation_id: int) -> tuple[dict, Any]:
        """Return the reservation with the given ID, and the response."""
        data, response = self._client.do("GET", f"{_ENDPOINT}/{int(reservation_id)}")
        return dict(data or {}), response

    def create(self, reservation: dict) -> tuple[dict, Any]:
        """Create a reservation; its ``options`` field is required.

        Returns the reservation as the API stored it, and the response.
        """
        if reservation.get("options") is None:
            raise ValueError("the Options field is required")
        data, response = self._client.do("PUT", _ENDPOINT, reservation)
        return dict(data or {}), response

    def edit(self, reservation: dict) -> tuple[dict, Any]:
        """Update an existing reservation; ``id`` and ``options`` are required.

        The given dict is refreshed in place from the API's answer and returned.
        """
        if reservation.get("id") is None:
            raise ValueError("the ID field is required")
        if reservation.get("options") is None:
            raise ValueError("the Options field is required")
        data, response = self._client.do(
            "POST", f"{_ENDPOINT}/{int(reservation['id'])}", reservation
        )
        if isinstance(data, dict):
            reservation.update(data)
        return reservation, response

    def delete(self, reservation_id: int) -> Any:
        """Remove a reservation entirely and return the response."""
        _, response = self._client.do("DELETE", f"{_ENDPOINT}/{int(reservation_id)}")
        return response