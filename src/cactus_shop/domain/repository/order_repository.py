"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cactus_shop.domain.model.identifiers import CustomerId, OrderId
from cactus_shop.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: OrderId) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_customer(self, customer_id: CustomerId) -> list[Order]:
        """Return every order placed by a customer."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> list[Order]:
        """Return every order currently in *status*."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""

    @abstractmethod
    def delete(self, order_id: OrderId) -> bool:
        """Remove an order. Return False if it was not stored."""

    @abstractmethod
    def exists(self, order_id: OrderId) -> bool:
        """Return True if an order with this ID is stored."""
