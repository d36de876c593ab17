"""Shared domain utilities.

This package is domain-accessible and should not depend on application code.
"""

from .shop_client_protocol import ShopClientProtocol, ShopClientFactory

__all__ = ["ShopClientProtocol", "ShopClientFactory"]
