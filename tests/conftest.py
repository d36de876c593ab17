"""Shared pytest fixtures for storefront client tests."""

from __future__ import annotations

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio

from clipify import AsyncClipify, Clipify
from tests.fixtures import RecordingTransport

TEST_BASE_URL = "https://shop.example.test"


@pytest.fixture
def base_url() -> str:
    return TEST_BASE_URL


@pytest.fixture
def transport() -> RecordingTransport:
    """Create a recording transport answering ``{"success": true}`` by default."""
    return RecordingTransport()


@pytest.fixture
def clipify(
    transport: RecordingTransport, base_url: str
) -> Generator[Clipify, None, None]:
    """Synchronous client wired to the recording transport."""
    http_client = transport.sync_client()
    with Clipify(base_url, http_client=http_client) as client:
        yield client
    http_client.close()


@pytest_asyncio.fixture
async def async_clipify(
    transport: RecordingTransport, base_url: str
) -> AsyncGenerator[AsyncClipify, None]:
    """Asynchronous client wired to the recording transport."""
    http_client = transport.async_client()
    async with AsyncClipify(base_url, http_client=http_client) as client:
        yield client
    await http_client.aclose()


@pytest.fixture
def shop_config_envelope() -> dict:
    return {
        "success": True,
        "config": {
            "address": {
                "addressType": None,
                "colony": "Centro",
                "firstAddress": "Av. Juarez 10",
                "municipality": "Cuauhtemoc",
                "postalCode": "06000",
                "secondAddress": "",
                "state": "CDMX",
            },
            "alias": "shop1",
            "createdAt": "2024-05-01T10:00:00Z",
            "email": "owner@shop1.test",
            "fullAddress": "Av. Juarez 10, Centro, CDMX",
            "image": "https://img.test/shop1.png",
            "opengraphBanner": "https://img.test/banner.png",
            "phone": "5555555555",
            "profileConfig": {
                "profileActive": True,
                "showAddress": True,
                "showEmail": False,
                "showPhone": True,
            },
            "proxyMerchantId": "3f0e5a44-6a62-4c1a-9d43-8f1f4d5c2b10",
            "proxyMerchantToken": "b7a1c6d2-0d8e-4f7e-9a51-2c9e6f3d4a11",
            "proxyUserId": "9c2d7e3f-1b4a-4c8d-8e2f-5a6b7c8d9e01",
            "publicDescription": "Coffee and pastries",
            "publicName": "Shop One",
            "updatedAt": "2024-06-01T10:00:00Z",
        },
    }
