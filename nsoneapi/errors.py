"""Exceptions raised by the API services."""

from __future__ import annotations

from typing import Any


class NS1Error(Exception):
    """Base class for every error raised by the API services."""

    default_message = "NS1 API request failed"

    def __init__(self, message: str | None = None, response: Any = None) -> None:
        self.message = message or self.default_message
        self.response = response
        super().__init__(self.message)

    @property
    def status_code(self) -> int | None:
        """HTTP status of the response that caused the error, if any."""
        return getattr(self.response, "status_code", None)


class APIError(NS1Error):
    """An error response from the API, carrying the server's message."""

    def __init__(self, message: str, response: Any = None) -> None:
        super().__init__(message, response)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class ZoneExistsError(NS1Error):
    """Raised when creating a zone that already exists."""

    default_message = "zone already exists"


class ZoneMissingError(NS1Error):
    """Raised when a zone does not exist."""

    default_message = "zone does not exist"


class RecordExistsError(NS1Error):
    """Raised when creating a record that already exists."""

    default_message = "record already exists"


class RecordMissingError(NS1Error):
    """Raised when a record does not exist."""

    default_message = "record does not exist"


class TsigKeyExistsError(NS1Error):
    """Raised when creating a TSIG key that already exists."""

    default_message = "TSIG key already exists"


class TsigKeyMissingError(NS1Error):
    """Raised when a TSIG key does not exist."""

    default_message = "TSIG key does not exist"


class AppMissingError(NS1Error):
    """Raised when a Pulsar application does not exist."""

    default_message = "pulsar application does not exist"


class JobMissingError(NS1Error):
    """Raised when a Pulsar job does not exist."""

    default_message = "pulsar job does not exist"