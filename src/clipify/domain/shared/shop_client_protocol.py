"""Protocol interface for storefront client implementations.

Services that consume storefront data can accept any object satisfying this
protocol, which keeps them testable with a fake in place of `AsyncClipify`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, Type, runtime_checkable
from types import TracebackType


@runtime_checkable
class ShopClientProtocol(Protocol):
    """Protocol defining the interface for async storefront clients.

    Every method resolves to the raw response envelope of its endpoint.
    """

    async def get_config(self, shop_name: str) -> Dict[str, Any]:
        """Get a shop's configuration.

        Args:
            shop_name: Public name of the shop

        Returns:
            Envelope with a ``config`` payload
        """
        ...

    async def get_categories(self, shop_name: str) -> Dict[str, Any]:
        """Get the categories of a shop.

        Args:
            shop_name: Public name of the shop

        Returns:
            Envelope with an ``items`` list of categories
        """
        ...

    async def get_products(
        self,
        category_id: str,
        proxy_merchant_token: str,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Get the products of a category.

        Args:
            category_id: ID of the category
            proxy_merchant_token: Merchant token from the shop configuration
            limit: Optional maximum number of products

        Returns:
            Envelope with an ``items`` list of products
        """
        ...

    async def get_product(
        self, product_id: str, proxy_merchant_token: str
    ) -> Dict[str, Any]:
        """Get a single product.

        Args:
            product_id: ID of the product
            proxy_merchant_token: Merchant token from the shop configuration

        Returns:
            Envelope with an ``item`` payload
        """
        ...

    async def get_coupons(self, proxy_merchant_token: str) -> Dict[str, Any]:
        """Get the active coupons of a merchant.

        Args:
            proxy_merchant_token: Merchant token from the shop configuration

        Returns:
            Envelope with an ``items`` list of coupons, possibly empty
        """
        ...

    async def aclose(self) -> None:
        """Close the client and release resources."""
        ...

    async def __aenter__(self: "ShopClientProtocol") -> "ShopClientProtocol": ...

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None: ...


# Factory type for creating storefront clients
ShopClientFactory = Callable[[], ShopClientProtocol]
