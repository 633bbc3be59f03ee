"""In-memory implementations of the repository interfaces.

Each repository keeps its aggregates in a dict guarded by a re-entrant
lock, so single operations are safe to call from several threads.
Aggregates are copied on the way in and on the way out: callers never
hold a reference into the store, which is how a real database behaves
and why a failed ``save`` cannot leave a half-updated aggregate behind.
"""

from __future__ import annotations

import copy
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from cactus_shop.domain.exceptions import AlreadyExistsError
from cactus_shop.domain.model.cactus import Cactus
from cactus_shop.domain.model.customer import Customer
from cactus_shop.domain.model.fertilizer import Fertilizer
from cactus_shop.domain.model.identifiers import (
    CactusId,
    CustomerId,
    EntityId,
    FertilizerId,
    OrderId,
    SellerId,
)
from cactus_shop.domain.model.order import Order, OrderStatus
from cactus_shop.domain.model.seller import Seller
from cactus_shop.domain.model.value_objects import Email
from cactus_shop.domain.repository.cactus_repository import CactusRepository
from cactus_shop.domain.repository.customer_repository import CustomerRepository
from cactus_shop.domain.repository.fertilizer_repository import FertilizerRepository
from cactus_shop.domain.repository.order_repository import OrderRepository
from cactus_shop.domain.repository.seller_repository import SellerRepository

K = TypeVar("K", bound=EntityId)
V = TypeVar("V")


class _InMemoryStore(Generic[K, V]):

    def __init__(self) -> None:
        self._store: dict[K, V] = {}
        self._lock = threading.RLock()

    def _get(self, key: K) -> V | None:
        with self._lock:
            entity = self._store.get(key)
            return copy.deepcopy(entity) if entity is not None else None

    def _put(self, key: K, entity: V) -> None:
        with self._lock:
            self._store[key] = copy.deepcopy(entity)

    def _select(self, predicate: Callable[[V], bool] | None = None) -> list[V]:
        with self._lock:
            return [
                copy.deepcopy(entity)
                for entity in self._store.values()
                if predicate is None or predicate(entity)
            ]

    def delete(self, key: K) -> bool:
        with self._lock:
            return self._store.pop(key, None) is not None

    def exists(self, key: K) -> bool:
        with self._lock:
            return key in self._store

    def clear(self) -> None:
        with self._lock:
            self._store.clear()


class InMemoryCactusRepository(_InMemoryStore[CactusId, Cactus], CactusRepository):

    def get_by_id(self, cactus_id: CactusId) -> Cactus | None:
        return self._get(cactus_id)

    def list_all(self) -> list[Cactus]:
        return self._select()

    def save(self, cactus: Cactus) -> None:
        self._put(cactus.id, cactus)


class InMemoryFertilizerRepository(
    _InMemoryStore[FertilizerId, Fertilizer], FertilizerRepository
):

    def get_by_id(self, fertilizer_id: FertilizerId) -> Fertilizer | None:
        return self._get(fertilizer_id)

    def list_all(self) -> list[Fertilizer]:
        return self._select()

    def save(self, fertilizer: Fertilizer) -> None:
        self._put(fertilizer.id, fertilizer)


class InMemoryCustomerRepository(
    _InMemoryStore[CustomerId, Customer], CustomerRepository
):

    def add(self, customer: Customer) -> None:
        with self._lock:
            if self._email_owner(customer.email) is not None:
                raise AlreadyExistsError(
                    f"Customer with email {customer.email} already exists"
                )
            self._put(customer.id, customer)

    def get_by_id(self, customer_id: CustomerId) -> Customer | None:
        return self._get(customer_id)

    def get_by_email(self, email: Email) -> Customer | None:
        with self._lock:
            owner = self._email_owner(email)
            return self._get(owner) if owner is not None else None

    def list_all(self) -> list[Customer]:
        return self._select()

    def save(self, customer: Customer) -> None:
        with self._lock:
            owner = self._email_owner(customer.email)
            if owner is not None and owner != customer.id:
                raise AlreadyExistsError(
                    f"Customer with email {customer.email} already exists"
                )
            self._put(customer.id, customer)

    def _email_owner(self, email: Email) -> CustomerId | None:
        for customer_id, customer in self._store.items():
            if customer.email == email:
                return customer_id
        return None


class InMemorySellerRepository(_InMemoryStore[SellerId, Seller], SellerRepository):

    def add(self, seller: Seller) -> None:
        with self._lock:
            if self._email_owner(seller.contact_email) is not None:
                raise AlreadyExistsError(
                    f"Seller with email {seller.contact_email} already exists"
                )
            self._put(seller.id, seller)

    def get_by_id(self, seller_id: SellerId) -> Seller | None:
        return self._get(seller_id)

    def get_by_email(self, email: Email) -> Seller | None:
        with self._lock:
            owner = self._email_owner(email)
            return self._get(owner) if owner is not None else None

    def list_active(self) -> list[Seller]:
        return self._select(lambda s: s.is_active)

    def list_all(self) -> list[Seller]:
        return self._select()

    def save(self, seller: Seller) -> None:
        with self._lock:
            owner = self._email_owner(seller.contact_email)
            if owner is not None and owner != seller.id:
                raise AlreadyExistsError(
                    f"Seller with email {seller.contact_email} already exists"
                )
            self._put(seller.id, seller)

    def _email_owner(self, email: Email) -> SellerId | None:
        for seller_id, seller in self._store.items():
            if seller.contact_email == email:
                return seller_id
        return None


class InMemoryOrderRepository(_InMemoryStore[OrderId, Order], OrderRepository):

    def get_by_id(self, order_id: OrderId) -> Order | None:
        return self._get(order_id)

    def list_by_customer(self, customer_id: CustomerId) -> list[Order]:
        return self._select(lambda o: o.customer_id == customer_id)

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return self._select(lambda o: o.status is status)

    def list_all(self) -> list[Order]:
        return self._select()

    def save(self, order: Order) -> None:
        self._put(order.id, order)
