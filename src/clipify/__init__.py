"""Client library for the clip-ify storefront API."""

from .application.envelope import (
    EnvelopeResult,
    Failure,
    Success,
    decode_categories,
    decode_config,
    decode_coupons,
    decode_envelope,
    decode_product,
    decode_products,
)
from .domain.errors import ClipifyError, ClipifyHTTPError, MissingArgumentError
from .domain.shared import ShopClientFactory, ShopClientProtocol
from .env import DEFAULT_BASE_URL, Settings, get_settings
from .infrastructure.clipify_client import AsyncClipify, Clipify

__version__ = "0.1.3"

__all__ = [
    "AsyncClipify",
    "Clipify",
    "ClipifyError",
    "ClipifyHTTPError",
    "DEFAULT_BASE_URL",
    "EnvelopeResult",
    "Failure",
    "MissingArgumentError",
    "Settings",
    "ShopClientFactory",
    "ShopClientProtocol",
    "Success",
    "decode_categories",
    "decode_config",
    "decode_coupons",
    "decode_envelope",
    "decode_product",
    "decode_products",
    "get_settings",
]
