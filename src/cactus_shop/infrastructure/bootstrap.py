"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from cactus_shop import config
from cactus_shop.application.cactus_service import CactusService
from cactus_shop.application.customer_service import CustomerService
from cactus_shop.application.event_publisher import EventPublisher
from cactus_shop.application.fertilizer_service import FertilizerService
from cactus_shop.application.order_service import OrderService
from cactus_shop.application.seller_service import SellerService
from cactus_shop.infrastructure.messaging.logging_event_publisher import (
    LoggingEventPublisher,
)
from cactus_shop.infrastructure.persistence.in_memory_repositories import (
    InMemoryCactusRepository,
    InMemoryCustomerRepository,
    InMemoryFertilizerRepository,
    InMemoryOrderRepository,
    InMemorySellerRepository,
)


@dataclass(frozen=True)
class Shop:
    """The five services, sharing one set of repositories."""

    cacti: CactusService
    customers: CustomerService
    fertilizers: FertilizerService
    sellers: SellerService
    orders: OrderService


def event_publisher() -> LoggingEventPublisher:
    return LoggingEventPublisher(config.get_event_logger_name())


def in_memory_shop(publisher: EventPublisher | None = None) -> Shop:
    cactus_repo = InMemoryCactusRepository()
    customer_repo = InMemoryCustomerRepository()
    fertilizer_repo = InMemoryFertilizerRepository()
    seller_repo = InMemorySellerRepository()
    order_repo = InMemoryOrderRepository()

    return Shop(
        cacti=CactusService(cactus_repo),
        customers=CustomerService(customer_repo),
        fertilizers=FertilizerService(fertilizer_repo),
        sellers=SellerService(seller_repo),
        orders=OrderService(
            order_repo=order_repo,
            customer_repo=customer_repo,
            cactus_repo=cactus_repo,
            fertilizer_repo=fertilizer_repo,
            event_publisher=publisher or event_publisher(),
        ),
    )
