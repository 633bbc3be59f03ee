"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass

from cactus_shop.domain.model.order import ProductId, ProductType


@dataclass(frozen=True)
class OrderItemRequest:
    """Input: what the customer asked for.

    The price is not part of the request; the order service looks it up
    in the catalog when the item is added.
    """

    product_id: ProductId
    product_type: ProductType
    quantity: int
