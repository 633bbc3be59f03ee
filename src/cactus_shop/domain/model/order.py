"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its items.  It is the only
aggregate with a lifecycle:

    PENDING -> CONFIRMED -> SHIPPED -> DELIVERED
    PENDING | CONFIRMED -> CANCELLED

Every transition re-checks the current status before acting and returns
the domain event it produced.  Publishing those events is the caller's
job, after the order has been saved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from cactus_shop.domain.exceptions import InvalidStateError, ValidationError
from cactus_shop.domain.model.events import (
    OrderCancelled,
    OrderConfirmed,
    OrderCreated,
    OrderDelivered,
    OrderShipped,
)
from cactus_shop.domain.model.identifiers import (
    CactusId,
    CustomerId,
    FertilizerId,
    OrderId,
)
from cactus_shop.domain.model.value_objects import Money

ProductId = CactusId | FertilizerId


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class ProductType(Enum):
    CACTUS = "CACTUS"
    FERTILIZER = "FERTILIZER"

    @staticmethod
    def of(product_id: ProductId) -> ProductType:
        if isinstance(product_id, CactusId):
            return ProductType.CACTUS
        if isinstance(product_id, FertilizerId):
            return ProductType.FERTILIZER
        raise ValidationError(f"Unknown product id type: {type(product_id).__name__}")


@dataclass(frozen=True)
class OrderItem:
    """One product line of an order.

    ``unit_price`` is a snapshot of the catalog price at the moment the
    item was added; later price changes do not reach it.
    """

    product_id: ProductId
    product_type: ProductType
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity <= 0:
            raise ValidationError("Quantity must be positive")
        if ProductType.of(self.product_id) is not self.product_type:
            raise ValidationError(
                f"Product type {self.product_type.value} does not match "
                f"product id {type(self.product_id).__name__}"
            )

    def total_price(self) -> Money:
        return self.unit_price * self.quantity


def _require_one_currency(items: list[OrderItem]) -> None:
    currencies = sorted({item.unit_price.currency for item in items})
    if len(currencies) > 1:
        raise ValidationError(
            f"All items in an order must share one currency, got {', '.join(currencies)}"
        )


@dataclass(eq=False)
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces the
    creation rules and produces the ``OrderCreated`` event.  The
    ``__init__`` is intentionally simple so a repository can reconstitute
    stored orders without re-validating or emitting anything.

    ``customer_id`` is not checked for existence here; that is the
    calling service's job.
    """

    id: OrderId
    customer_id: CustomerId
    items: list[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: CustomerId,
        items: list[OrderItem],
    ) -> tuple[Order, OrderCreated]:
        """Create a new PENDING order and its creation event."""
        if not items:
            raise ValidationError("Order must contain at least one item")
        _require_one_currency(items)

        now = _now()
        order = Order(
            id=OrderId.generate(),
            customer_id=customer_id,
            items=list(items),
            created_at=now,
            updated_at=now,
        )
        return order, OrderCreated(order.id, now, customer_id)

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> OrderConfirmed:
        self._require_status("confirm", OrderStatus.PENDING)
        self.status = OrderStatus.CONFIRMED
        return OrderConfirmed(self.id, self._touch())

    def ship(self) -> OrderShipped:
        self._require_status("ship", OrderStatus.CONFIRMED)
        self.status = OrderStatus.SHIPPED
        return OrderShipped(self.id, self._touch())

    def deliver(self) -> OrderDelivered:
        self._require_status("deliver", OrderStatus.SHIPPED)
        self.status = OrderStatus.DELIVERED
        return OrderDelivered(self.id, self._touch())

    def cancel(self) -> OrderCancelled:
        """Transition PENDING|CONFIRMED -> CANCELLED.

        Once an order has shipped it can no longer be cancelled.
        """
        self._require_status("cancel", OrderStatus.PENDING, OrderStatus.CONFIRMED)
        self.status = OrderStatus.CANCELLED
        return OrderCancelled(self.id, self._touch())

    # --- Item changes (PENDING only) ------------------------------------------

    def add_item(self, item: OrderItem) -> None:
        self._require_status("add items to", OrderStatus.PENDING)
        _require_one_currency([*self.items, item])
        self.items.append(item)
        self._touch()

    def remove_item(self, product_id: ProductId) -> None:
        """Remove every item for *product_id*; a product not in the order is ignored.

        The order must keep at least one item, so removing the last
        remaining product is rejected and leaves the order unchanged.
        """
        self._require_status("remove items from", OrderStatus.PENDING)
        remaining = [item for item in self.items if item.product_id != product_id]
        if not remaining:
            raise ValidationError("Order must contain at least one item")
        self.items = remaining
        self._touch()

    # --- Computed values ------------------------------------------------------

    def calculate_total_amount(self) -> Money:
        """Sum of all line totals, in the currency the items are priced in."""
        if not self.items:
            return Money.zero()
        currency = self.items[0].unit_price.currency
        return Money.sum((item.total_price() for item in self.items), currency)

    # --- Internal helpers -----------------------------------------------------

    def _require_status(self, action: str, *allowed: OrderStatus) -> None:
        if self.status not in allowed:
            expected = " or ".join(s.value for s in allowed)
            raise InvalidStateError(
                f"Cannot {action} order: current status is {self.status.value}, "
                f"expected {expected}"
            )

    def _touch(self) -> datetime:
        self.updated_at = _now()
        return self.updated_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
