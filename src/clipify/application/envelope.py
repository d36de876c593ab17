"""Typed views over raw response envelopes.

The client hands back envelopes untouched. These helpers are opt-in: they
split an envelope into a ``Success`` carrying a validated payload or a
``Failure`` carrying the server's error message. An in-band
``success: false`` becomes a ``Failure`` value and is never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from .dtos import CategoryItemDTO, CouponItemDTO, ProductItemDTO, ShopConfigDTO

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: Optional[T]


@dataclass(frozen=True)
class Failure:
    error: Optional[str]


EnvelopeResult = Union[Success[T], Failure]


def decode_envelope(
    envelope: Mapping[str, Any], payload_key: str, model: Type[M]
) -> EnvelopeResult[Any]:
    """Decode ``envelope[payload_key]`` with ``model`` when ``success`` is set.

    Lists are validated item by item. A missing payload decodes to ``None``.
    """
    if not envelope.get("success"):
        return Failure(error=envelope.get("error"))

    raw = envelope.get(payload_key)
    if raw is None:
        return Success(payload=None)
    if isinstance(raw, list):
        return Success(payload=[model.model_validate(item) for item in raw])
    return Success(payload=model.model_validate(raw))


def decode_config(envelope: Mapping[str, Any]) -> EnvelopeResult[ShopConfigDTO]:
    return decode_envelope(envelope, "config", ShopConfigDTO)


def decode_categories(
    envelope: Mapping[str, Any],
) -> EnvelopeResult[list[CategoryItemDTO]]:
    return decode_envelope(envelope, "items", CategoryItemDTO)


def decode_products(
    envelope: Mapping[str, Any],
) -> EnvelopeResult[list[ProductItemDTO]]:
    return decode_envelope(envelope, "items", ProductItemDTO)


def decode_product(envelope: Mapping[str, Any]) -> EnvelopeResult[ProductItemDTO]:
    return decode_envelope(envelope, "item", ProductItemDTO)


def decode_coupons(
    envelope: Mapping[str, Any],
) -> EnvelopeResult[list[CouponItemDTO]]:
    return decode_envelope(envelope, "items", CouponItemDTO)
