"""Domain events raised by the Order aggregate.

Events are immutable facts.  They are handed back to the caller by the
operation that produced them and are never stored with the order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from cactus_shop.domain.model.identifiers import CustomerId, OrderId


@dataclass(frozen=True)
class DomainEvent:
    order_id: OrderId
    occurred_at: datetime

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    customer_id: CustomerId


@dataclass(frozen=True)
class OrderConfirmed(DomainEvent):
    pass


@dataclass(frozen=True)
class OrderShipped(DomainEvent):
    pass


@dataclass(frozen=True)
class OrderDelivered(DomainEvent):
    pass


@dataclass(frozen=True)
class OrderCancelled(DomainEvent):
    pass
