"""Service for the 'stats/qps' endpoint."""

from __future__ import annotations

from typing import Any

from .errors import APIError, RecordMissingError, ZoneMissingError

STATS_QPS_ENDPOINT = "stats/qps"


class StatsService:
    """Reads current queries-per-second figures.

    The figures lag by about 30 seconds and are averaged over the preceding
    minute. ``client`` must provide ``do(method, path, body=None)`` returning
    ``(data, response)`` and raising :class:`APIError` on error responses.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def get_qps(self) -> tuple[float, Any]:
        """Return the account's current QPS, and the response."""
        return self._get_qps(STATS_QPS_ENDPOINT)

    def get_zone_qps(self, zone: str) -> tuple[float, Any]:
        """Return the current QPS of one zone, and the response."""
        return self._get_qps(f"{STATS_QPS_ENDPOINT}/{zone}")

    def get_record_qps(self, zone: str, record: str, record_type: str) -> tuple[float, Any]:
        """Return the current QPS of one record, and the response."""
        return self._get_qps(f"{STATS_QPS_ENDPOINT}/{zone}/{record}/{record_type}")

    def _get_qps(self, path: str) -> tuple[float, Any]:
        try:
            data, response = self._client.do("GET", path)
        except APIError as err:
            if err.message == "zone not found":
                raise ZoneMissingError() from err
            if err.message == "record not found":
                raise RecordMissingError() from err
            raise
        qps = data.get("qps", 0.0) if isinstance(data, dict) else 0.0
        return float(qps), response