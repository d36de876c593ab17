from __future__ import annotations

import logging
from typing import Any, Optional, Type
from types import TracebackType

import httpx

from ...domain.errors import ClipifyHTTPError

logger = logging.getLogger(__name__)


def _error_from_response(response: httpx.Response) -> ClipifyHTTPError:
    """Build the error raised for a non-2xx response.

    The body is decoded on a best-effort basis: when it is a JSON object with
    an ``error`` field that message is used verbatim, otherwise a generic
    message carrying the status code.
    """
    error_data: Any = None
    try:
        error_data = response.json()
    except ValueError:
        # Body is not JSON
        pass

    if isinstance(error_data, dict) and error_data.get("error"):
        message = str(error_data["error"])
    else:
        message = f"Request failed with status {response.status_code}"
    return ClipifyHTTPError(message, status_code=response.status_code, response=response)


class HttpClient:
    """Thin synchronous HTTP client wrapper around httpx.

    - Appends endpoint paths to the base URL as-is.
    - Applies a default timeout when it creates its own httpx client.
    - Raises ``ClipifyHTTPError`` for non-successful responses and returns
      the decoded JSON body otherwise.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._base_url = base_url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}{endpoint}"

    def request(self, endpoint: str, *, method: str = "GET", **options: Any) -> Any:
        url = self._url(endpoint)
        try:
            resp = self._client.request(method, url, **options)
            if not resp.is_success:
                raise _error_from_response(resp)
            return resp.json()
        except Exception as exc:
            logger.error("clip-ify: Error fetching %s: %r", url, exc)
            raise

    def get(self, endpoint: str, **options: Any) -> Any:
        return self.request(endpoint, method="GET", **options)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()


class AsyncHttpClient:
    """Thin asynchronous HTTP client wrapper around httpx.AsyncClient.

    Mirrors ``HttpClient``; every request is a single awaited round trip with
    no retries and no state carried between calls.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = base_url
        self._owns_client = client is None
        self._client = (
            client if client is not None else httpx.AsyncClient(timeout=timeout)
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}{endpoint}"

    async def request(
        self, endpoint: str, *, method: str = "GET", **options: Any
    ) -> Any:
        url = self._url(endpoint)
        try:
            resp = await self._client.request(method, url, **options)
            if not resp.is_success:
                raise _error_from_response(resp)
            return resp.json()
        except Exception as exc:
            logger.error("clip-ify: Error fetching %s: %r", url, exc)
            raise

    async def get(self, endpoint: str, **options: Any) -> Any:
        return await self.request(endpoint, method="GET", **options)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
