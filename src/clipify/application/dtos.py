"""Data Transfer Objects for storefront payloads.

Field names follow the API's camelCase on the wire and snake_case in
Python. Every field is optional, unknown fields are kept, numbers sent for
string fields are converted to strings and a null list decodes as empty,
so a payload that grows, omits or loosens fields still decodes.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class StorefrontDTO(BaseModel):
    """Base for lenient storefront payload models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )


# Shop configuration
class ShopAddressDTO(StorefrontDTO):
    address_type: Optional[str] = None
    colony: Optional[str] = None
    first_address: Optional[str] = None
    municipality: Optional[str] = None
    postal_code: Optional[str] = None
    second_address: Optional[str] = None
    state: Optional[str] = None


class ShopProfileConfigDTO(StorefrontDTO):
    """Public profile visibility flags."""

    profile_active: Optional[bool] = None
    show_address: Optional[bool] = None
    show_email: Optional[bool] = None
    show_phone: Optional[bool] = None


class ShopConfigDTO(StorefrontDTO):
    """Shop configuration.

    ``proxy_merchant_token`` is required by the product and coupon endpoints.
    """

    address: Optional[ShopAddressDTO] = None
    alias: Optional[str] = None
    created_at: Optional[str] = None
    email: Optional[str] = None
    full_address: Optional[str] = None
    image: Optional[str] = None
    opengraph_banner: Optional[str] = None
    phone: Optional[str] = None
    profile_config: Optional[ShopProfileConfigDTO] = None
    proxy_merchant_id: Optional[str] = None
    proxy_merchant_token: Optional[str] = None
    proxy_user_id: Optional[str] = None
    public_description: Optional[str] = None
    public_name: Optional[str] = None
    updated_at: Optional[str] = None


# Categories
class CategoryProductRefDTO(StorefrontDTO):
    product_id: Optional[str] = None
    product_name: Optional[str] = None


class CategoryItemDTO(StorefrontDTO):
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    products: list[CategoryProductRefDTO] = []

    @field_validator("products", mode="before")
    @classmethod
    def null_products_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


# Products
class ProductModifierDTO(StorefrontDTO):
    modifier_id: Optional[str] = None
    modifier_name: Optional[str] = None
    # Only populated on the single product endpoint
    options: Optional[list[dict[str, Any]]] = None


class ProductItemDTO(StorefrontDTO):
    base_price: Optional[str] = None
    ct: Optional[str] = None
    description: Optional[str] = None
    enabled: Optional[bool] = None
    image: Optional[str] = None
    images: list[str] = []
    modifiers: list[ProductModifierDTO] = []
    number_of_modifiers: Optional[int] = None
    number_of_variants: Optional[int] = None
    price: Optional[str] = None
    product_id: Optional[str] = None
    product_name: Optional[str] = None
    sku: Optional[str] = None
    stock: Optional[int] = None
    stock_status: Optional[str] = None
    version: Optional[str] = None

    @field_validator("images", "modifiers", mode="before")
    @classmethod
    def null_lists_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


# Coupons
class CouponItemDTO(StorefrontDTO):
    coupon_id: Optional[str] = None
    coupon_name: Optional[str] = None
    discount_type: Optional[str] = None
    value: Optional[Union[int, float]] = None
    min_purchase_amount: Optional[str] = None
    valid_from: Optional[str] = None
    valid_until: Optional[str] = None
