"""Application service: order placement and lifecycle use cases.

Orchestrates the flow between repositories and the Order aggregate.
This is the only service that coordinates several aggregates: the
customer and every ordered product are looked up before an order is
built, and catalog prices are copied into the order items (price
snapshot).

Every state-changing use case follows the same steps:

1. Load the order (fail with EntityNotFoundError if absent).
2. Let the aggregate validate and apply the change.
3. Save the order.
4. Publish the events produced in step 2.

Events are published only after the save succeeded, so a failed
operation never leaks an event.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from cactus_shop.application.dto import OrderItemRequest
from cactus_shop.application.event_publisher import EventPublisher
from cactus_shop.application.result import ServiceResult, service_err, service_ok
from cactus_shop.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InvalidStateError,
    ValidationError,
)
from cactus_shop.domain.model.events import DomainEvent
from cactus_shop.domain.model.identifiers import (
    CactusId,
    CustomerId,
    FertilizerId,
    OrderId,
)
from cactus_shop.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    ProductId,
)
from cactus_shop.domain.model.value_objects import Money
from cactus_shop.domain.repository.cactus_repository import CactusRepository
from cactus_shop.domain.repository.customer_repository import CustomerRepository
from cactus_shop.domain.repository.fertilizer_repository import FertilizerRepository
from cactus_shop.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        cactus_repo: CactusRepository,
        fertilizer_repo: FertilizerRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._cactus_repo = cactus_repo
        self._fertilizer_repo = fertilizer_repo
        self._event_publisher = event_publisher

    # --- Commands -------------------------------------------------------------

    def place_order(
        self,
        customer_id: CustomerId,
        items: list[OrderItemRequest],
    ) -> ServiceResult[Order]:
        """Place a new PENDING order for an existing customer.

        Steps:
        1. Check the customer exists.
        2. Resolve each requested product, checking cacti are on sale.
        3. Build OrderItems with *current* catalog prices (snapshot).
        4. Let the Order aggregate validate, then persist and publish.
        """
        if not self._customer_repo.exists(customer_id):
            return service_err(EntityNotFoundError(f"Customer not found: {customer_id}"))

        if not items:
            return service_err(ValidationError("Order must contain at least one item"))

        try:
            order_items = [self._build_item(request) for request in items]
            order, created = Order.create(customer_id, order_items)
        except DomainException as exc:
            logger.debug("Order for customer %s rejected: %s", customer_id, exc)
            return service_err(exc)

        self._order_repo.save(order)
        self._event_publisher.publish([created])
        logger.info(
            "Placed order %s for customer %s (total %s)",
            order.id,
            customer_id,
            order.calculate_total_amount(),
        )
        return service_ok(order)

    def confirm_order(self, order_id: OrderId) -> ServiceResult[Order]:
        return self._transition(order_id, Order.confirm)

    def ship_order(self, order_id: OrderId) -> ServiceResult[Order]:
        return self._transition(order_id, Order.ship)

    def deliver_order(self, order_id: OrderId) -> ServiceResult[Order]:
        return self._transition(order_id, Order.deliver)

    def cancel_order(self, order_id: OrderId) -> ServiceResult[Order]:
        return self._transition(order_id, Order.cancel)

    def add_item(self, order_id: OrderId, request: OrderItemRequest) -> ServiceResult[Order]:
        """Add a product to a PENDING order at today's catalog price."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return service_err(EntityNotFoundError(f"Order not found: {order_id}"))

        try:
            order.add_item(self._build_item(request))
        except DomainException as exc:
            logger.debug("Adding item to order %s rejected: %s", order_id, exc)
            return service_err(exc)

        self._order_repo.save(order)
        return service_ok(order)

    def remove_item(self, order_id: OrderId, product_id: ProductId) -> ServiceResult[Order]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return service_err(EntityNotFoundError(f"Order not found: {order_id}"))

        try:
            order.remove_item(product_id)
        except DomainException as exc:
            logger.debug("Removing item from order %s rejected: %s", order_id, exc)
            return service_err(exc)

        self._order_repo.save(order)
        return service_ok(order)

    def delete_order(self, order_id: OrderId) -> bool:
        return self._order_repo.delete(order_id)

    # --- Queries --------------------------------------------------------------

    def get_order(self, order_id: OrderId) -> Order | None:
        return self._order_repo.get_by_id(order_id)

    def list_customer_orders(self, customer_id: CustomerId) -> list[Order]:
        return self._order_repo.list_by_customer(customer_id)

    def list_orders_by_status(self, status: OrderStatus) -> list[Order]:
        return self._order_repo.list_by_status(status)

    # --- Internal helpers -----------------------------------------------------

    def _transition(
        self,
        order_id: OrderId,
        operation: Callable[[Order], DomainEvent],
    ) -> ServiceResult[Order]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return service_err(EntityNotFoundError(f"Order not found: {order_id}"))

        try:
            event = operation(order)
        except DomainException as exc:
            logger.debug("Order %s: %s", order_id, exc)
            return service_err(exc)

        self._order_repo.save(order)
        self._event_publisher.publish([event])
        logger.info("Order %s is now %s", order_id, order.status.value)
        return service_ok(order)

    def _build_item(self, request: OrderItemRequest) -> OrderItem:
        return OrderItem(
            product_id=request.product_id,
            product_type=request.product_type,
            quantity=request.quantity,
            unit_price=self._current_price(request.product_id),
        )

    def _current_price(self, product_id: ProductId) -> Money:
        if isinstance(product_id, CactusId):
            cactus = self._cactus_repo.get_by_id(product_id)
            if cactus is None:
                raise EntityNotFoundError(f"Cactus not found: {product_id}")
            if not cactus.is_available:
                raise InvalidStateError(f"Cactus is not available: {cactus.name}")
            return cactus.price

        if isinstance(product_id, FertilizerId):
            fertilizer = self._fertilizer_repo.get_by_id(product_id)
            if fertilizer is None:
                raise EntityNotFoundError(f"Fertilizer not found: {product_id}")
            return fertilizer.price

        raise ValidationError(f"Unknown product id type: {type(product_id).__name__}")
