from __future__ import annotations

from typing import Any, Dict, Optional, Type
from types import TracebackType

import httpx

from ..domain.errors import MissingArgumentError
from ..env import DEFAULT_BASE_URL, Settings
from .http.http_client import AsyncHttpClient, HttpClient


def _require(operation: str, **params: Optional[str]) -> None:
    """Raise ``MissingArgumentError`` if any of ``params`` is empty."""
    if all(params.values()):
        return
    names = [f"'{name}'" for name in params]
    if len(names) == 1:
        detail = f"{names[0]} is required."
    else:
        detail = f"{', '.join(names[:-1])} and {names[-1]} are required."
    raise MissingArgumentError(f"Clipify.{operation}: {detail}")


def _products_endpoint(
    category_id: str, proxy_merchant_token: str, limit: Optional[int]
) -> str:
    endpoint = f"/products/{category_id}/{proxy_merchant_token}"
    # limit=0 is still sent
    if limit is not None:
        endpoint += f"?limit={limit}"
    return endpoint


class Clipify:
    """Synchronous client for the clip-ify storefront API.

    Every method returns the decoded JSON envelope exactly as the API sent
    it. An in-band ``{"success": false}`` body on a 2xx response is returned,
    not raised; only non-2xx statuses raise ``ClipifyHTTPError``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._http = HttpClient(
            base_url or DEFAULT_BASE_URL, timeout=timeout, client=http_client
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, http_client: Optional[httpx.Client] = None
    ) -> "Clipify":
        return cls(settings.base_url, timeout=settings.timeout, http_client=http_client)

    @property
    def base_url(self) -> str:
        return self._http.base_url

    def _request(self, endpoint: str, **options: Any) -> Any:
        return self._http.request(endpoint, **options)

    def get_config(self, shop_name: str) -> Dict[str, Any]:
        """Fetch a shop's configuration, including its ``proxyMerchantToken``."""
        _require("get_config", shop_name=shop_name)
        return self._request(f"/config/{shop_name}")

    def get_categories(self, shop_name: str) -> Dict[str, Any]:
        _require("get_categories", shop_name=shop_name)
        return self._request(f"/categories/{shop_name}")

    def get_products(
        self,
        category_id: str,
        proxy_merchant_token: str,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Fetch the products of a category.

        ``proxy_merchant_token`` comes from ``get_config``. ``limit`` is sent
        as a query parameter whenever it is given, including ``0``.
        """
        _require(
            "get_products",
            category_id=category_id,
            proxy_merchant_token=proxy_merchant_token,
        )
        return self._request(
            _products_endpoint(category_id, proxy_merchant_token, limit)
        )

    def get_product(self, product_id: str, proxy_merchant_token: str) -> Dict[str, Any]:
        _require(
            "get_product",
            product_id=product_id,
            proxy_merchant_token=proxy_merchant_token,
        )
        return self._request(f"/product/{product_id}/{proxy_merchant_token}")

    def get_coupons(self, proxy_merchant_token: str) -> Dict[str, Any]:
        """Fetch the active coupons of a merchant. ``items`` may be empty."""
        _require("get_coupons", proxy_merchant_token=proxy_merchant_token)
        return self._request(f"/coupons/{proxy_merchant_token}")

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "Clipify":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()


class AsyncClipify:
    """Asynchronous client for the clip-ify storefront API.

    Mirrors `Clipify` but uses `AsyncHttpClient` and async methods.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._http = AsyncHttpClient(
            base_url or DEFAULT_BASE_URL, timeout=timeout, client=http_client
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, http_client: Optional[httpx.AsyncClient] = None
    ) -> "AsyncClipify":
        return cls(settings.base_url, timeout=settings.timeout, http_client=http_client)

    @property
    def base_url(self) -> str:
        return self._http.base_url

    async def _request(self, endpoint: str, **options: Any) -> Any:
        return await self._http.request(endpoint, **options)

    async def get_config(self, shop_name: str) -> Dict[str, Any]:
        _require("get_config", shop_name=shop_name)
        return await self._request(f"/config/{shop_name}")

    async def get_categories(self, shop_name: str) -> Dict[str, Any]:
        _require("get_categories", shop_name=shop_name)
        return await self._request(f"/categories/{shop_name}")

    async def get_products(
        self,
        category_id: str,
        proxy_merchant_token: str,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        _require(
            "get_products",
            category_id=category_id,
            proxy_merchant_token=proxy_merchant_token,
        )
        return await self._request(
            _products_endpoint(category_id, proxy_merchant_token, limit)
        )

    async def get_product(
        self, product_id: str, proxy_merchant_token: str
    ) -> Dict[str, Any]:
        _require(
            "get_product",
            product_id=product_id,
            proxy_merchant_token=proxy_merchant_token,
        )
        return await self._request(f"/product/{product_id}/{proxy_merchant_token}")

    async def get_coupons(self, proxy_merchant_token: str) -> Dict[str, Any]:
        _require("get_coupons", proxy_merchant_token=proxy_merchant_token)
        return await self._request(f"/coupons/{proxy_merchant_token}")

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncClipify":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
