"""Custom exceptions for the MeteoSwiss feed client."""

from __future__ import annotations


class MeteoSwissError(Exception):
    """Base exception for all MeteoSwiss feed errors."""


class FetchError(MeteoSwissError):
    """Base exception for anything that fails a fetch-and-decode cycle."""


class TransportError(FetchError):
    """Raised when the request could not complete (DNS, connection, timeout)."""


class FetchConnectionError(TransportError):
    """Raised when the client cannot connect to the data server."""


class FetchTimeoutError(TransportError):
    """Raised when a request to the data server times out."""


class StatusError(FetchError):
    """Raised when the server answers with a non-success status."""

    def __init__(self, status_code: int, url: str = "") -> None:
        self.status_code = status_code
        self.url = url
        message = f"HTTP {status_code}"
        if url:
            message = f"{message} for {url}"
        super().__init__(message)


class DecodeError(FetchError):
    """Raised when a required CSV field is missing or cannot be parsed."""

    def __init__(self, row: int, column: str, reason: str) -> None:
        self.row = row
        self.column = column
        self.reason = reason
        super().__init__(f"row {row}, column {column!r}: {reason}")


class SchedulerError(MeteoSwissError):
    """Raised on an invalid scheduler lifecycle transition."""
