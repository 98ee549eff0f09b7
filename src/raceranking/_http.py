"""HTTP transports for list endpoints returning JSON documents.

Every endpoint the sources read answers a filtered query with a JSON array
of documents. An empty array and a 404 both mean "nothing matched"; the
transports report the latter as None and leave picking a document to the
caller.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from raceranking.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from raceranking.exceptions import (
    RankingAPIError,
    RankingConnectionError,
    RankingTimeoutError,
    RankingValidationError,
)

Documents = list[dict[str, Any]]
Query = list[tuple[str, str]]

_HEADERS = {"Accept": "application/json"}


@contextmanager
def _transport_errors() -> Iterator[None]:
    """Re-raise httpx network failures as package errors."""
    try:
        yield
    except httpx.ConnectError as exc:
        raise RankingConnectionError(str(exc)) from exc
    except httpx.TimeoutException as exc:
        raise RankingTimeoutError(str(exc)) from exc


def _documents(response: httpx.Response) -> Documents | None:
    """Documents of a list response; None when the collection is not found."""
    if response.status_code == 404:
        return None
    if response.status_code >= 400:
        raise RankingAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    body = response.json()
    if not isinstance(body, list):
        raise RankingValidationError(
            f"Expected a JSON array from {response.request.url.path}, "
            f"got {type(body).__name__}"
        )
    return body


class SyncTransport:
    """Blocking list-endpoint reader over httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, headers=_HEADERS)

    def get(self, endpoint: str, query: Query) -> Documents | None:
        """Fetch the documents of *endpoint* matching *query*.

        Query pairs keep their order and may repeat a key.
        """
        with _transport_errors():
            response = self._client.get(endpoint, params=query)
        return _documents(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Non-blocking twin of SyncTransport over httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=_HEADERS)

    async def get(self, endpoint: str, query: Query) -> Documents | None:
        """Fetch the documents of *endpoint* matching *query*."""
        with _transport_errors():
            response = await self._client.get(endpoint, params=query)
        return _documents(response)

    async def close(self) -> None:
        await self._client.aclose()
