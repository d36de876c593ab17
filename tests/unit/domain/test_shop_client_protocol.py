"""Unit tests for the storefront client protocol."""

from __future__ import annotations

from typing import Any, Dict, Optional

import pytest

from clipify import AsyncClipify, Clipify, ShopClientFactory, ShopClientProtocol
from tests.fixtures import RecordingTransport


class StaticShopClient:
    """Fake storefront client answering every call with a fixed envelope."""

    def __init__(self, envelope: Dict[str, Any]) -> None:
        self.envelope = envelope

    async def get_config(self, shop_name: str) -> Dict[str, Any]:
        return self.envelope

    async def get_categories(self, shop_name: str) -> Dict[str, Any]:
        return self.envelope

    async def get_products(
        self,
        category_id: str,
        proxy_merchant_token: str,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        return self.envelope

    async def get_product(
        self, product_id: str, proxy_merchant_token: str
    ) -> Dict[str, Any]:
        return self.envelope

    async def get_coupons(self, proxy_merchant_token: str) -> Dict[str, Any]:
        return self.envelope

    async def aclose(self) -> None:
        return None

    async def __aenter__(self) -> "StaticShopClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


async def _merchant_token(factory: ShopClientFactory, shop_name: str) -> str:
    async with factory() as client:
        envelope = await client.get_config(shop_name)
    return envelope["config"]["proxyMerchantToken"]


@pytest.mark.asyncio
async def test_async_client_satisfies_protocol(transport: RecordingTransport) -> None:
    http_client = transport.async_client()
    async with AsyncClipify(http_client=http_client) as client:
        assert isinstance(client, ShopClientProtocol)
    await http_client.aclose()


def test_sync_client_does_not_satisfy_async_protocol() -> None:
    with Clipify() as client:
        assert not isinstance(client, ShopClientProtocol)


@pytest.mark.asyncio
async def test_fake_client_can_be_injected(shop_config_envelope: dict) -> None:
    factory: ShopClientFactory = lambda: StaticShopClient(shop_config_envelope)
    token = await _merchant_token(factory, "shop1")
    assert token == "b7a1c6d2-0d8e-4f7e-9a51-2c9e6f3d4a11"


@pytest.mark.asyncio
async def test_real_client_through_factory(
    transport: RecordingTransport, shop_config_envelope: dict
) -> None:
    transport.set_json_response(shop_config_envelope)
    http_client = transport.async_client()
    token = await _merchant_token(
        lambda: AsyncClipify("https://shop.test", http_client=http_client), "shop1"
    )
    await http_client.aclose()
    assert token == "b7a1c6d2-0d8e-4f7e-9a51-2c9e6f3d4a11"
    assert transport.last_url == "https://shop.test/config/shop1"
