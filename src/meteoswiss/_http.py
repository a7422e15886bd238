"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import httpx

from meteoswiss.exceptions import (
    FetchConnectionError,
    FetchTimeoutError,
    StatusError,
    TransportError,
)

DEFAULT_TIMEOUT = 30.0
DEFAULT_ENCODING = "utf-8"


def _handle_response(response: httpx.Response, encoding: str) -> str:
    """Validate response status and return the body as text."""
    if not response.is_success:
        raise StatusError(status_code=response.status_code, url=str(response.url))
    response.encoding = encoding
    return response.text


class SyncTransport:
    """Blocking HTTP transport using httpx.Client."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self._encoding = encoding
        self._client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"Accept": "text/csv, text/plain, */*"},
        )

    def get_text(self, url: str) -> str:
        """Perform a GET request and return the decoded body."""
        try:
            response = self._client.get(url)
        except httpx.ConnectError as exc:
            raise FetchConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(str(exc)) from exc
        except httpx.RequestError as exc:
            raise TransportError(str(exc)) from exc
        return _handle_response(response, self._encoding)

    def close(self) -> None:
        self._client.close()
