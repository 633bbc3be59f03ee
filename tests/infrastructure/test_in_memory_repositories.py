"""Tests for the in-memory repositories."""

import threading

import pytest

from cactus_shop.domain.exceptions import AlreadyExistsError
from cactus_shop.domain.model.identifiers import CactusId, CustomerId
from cactus_shop.domain.model.order import Order, OrderItem, OrderStatus, ProductType
from cactus_shop.domain.model.seller import Seller
from cactus_shop.domain.model.value_objects import Email, Money
from cactus_shop.infrastructure.persistence.in_memory_repositories import (
    InMemoryCactusRepository,
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemorySellerRepository,
)
from tests.fakes import make_cactus, make_customer


def _make_order(customer_id=None) -> Order:
    item = OrderItem(CactusId.generate(), ProductType.CACTUS, 1, Money.of("10"))
    order, _ = Order.create(customer_id or CustomerId.generate(), [item])
    return order


class TestStoreBasics:

    def test_save_and_get(self):
        repo = InMemoryCactusRepository()
        cactus = make_cactus()
        repo.save(cactus)
        assert repo.get_by_id(cactus.id) == cactus
        assert repo.exists(cactus.id)

    def test_missing_id(self):
        repo = InMemoryCactusRepository()
        assert repo.get_by_id(CactusId.generate()) is None
        assert not repo.exists(CactusId.generate())

    def test_delete(self):
        repo = InMemoryCactusRepository()
        cactus = make_cactus()
        repo.save(cactus)
        assert repo.delete(cactus.id) is True
        assert repo.delete(cactus.id) is False
        assert repo.list_all() == []

    def test_clear(self):
        repo = InMemoryCactusRepository()
        repo.save(make_cactus())
        repo.save(make_cactus())
        repo.clear()
        assert repo.list_all() == []


class TestCopySemantics:

    def test_mutating_a_loaded_aggregate_does_not_touch_the_store(self):
        repo = InMemoryCactusRepository()
        cactus = make_cactus("10.00")
        repo.save(cactus)

        loaded = repo.get_by_id(cactus.id)
        loaded.update_price(Money.of("99"))

        assert repo.get_by_id(cactus.id).price == Money.of("10.00")

    def test_mutating_after_save_does_not_touch_the_store(self):
        repo = InMemoryOrderRepository()
        order = _make_order()
        repo.save(order)

        order.confirm()

        assert repo.get_by_id(order.id).status == OrderStatus.PENDING


class TestCustomerRepository:

    def test_add_rejects_duplicate_email(self):
        repo = InMemoryCustomerRepository()
        repo.add(make_customer("john@example.com"))
        with pytest.raises(AlreadyExistsError, match="already exists"):
            repo.add(make_customer("john@example.com"))

    def test_save_rejects_email_owned_by_someone_else(self):
        repo = InMemoryCustomerRepository()
        repo.add(make_customer("john@example.com"))
        jane = make_customer("jane@example.com")
        repo.add(jane)

        jane.update_contact_info("john@example.com", "+1234567890")
        with pytest.raises(AlreadyExistsError):
            repo.save(jane)

    def test_get_by_email(self):
        repo = InMemoryCustomerRepository()
        customer = make_customer("john@example.com")
        repo.add(customer)
        assert repo.get_by_email(Email("john@example.com")) == customer
        assert repo.get_by_email(Email("other@example.com")) is None

    def test_concurrent_add_keeps_one(self):
        repo = InMemoryCustomerRepository()
        barrier = threading.Barrier(8)
        failures = []

        def register():
            customer = make_customer("race@example.com")
            barrier.wait()
            try:
                repo.add(customer)
            except AlreadyExistsError as exc:
                failures.append(exc)

        threads = [threading.Thread(target=register) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(repo.list_all()) == 1
        assert len(failures) == 7


class TestSellerRepository:

    def test_list_active(self):
        repo = InMemorySellerRepository()
        open_shop = Seller.create("Open", "open@example.com")
        closed_shop = Seller.create("Closed", "closed@example.com")
        closed_shop.deactivate()
        repo.add(open_shop)
        repo.add(closed_shop)

        assert repo.list_active() == [open_shop]

    def test_add_rejects_duplicate_email(self):
        repo = InMemorySellerRepository()
        repo.add(Seller.create("Open", "open@example.com"))
        with pytest.raises(AlreadyExistsError):
            repo.add(Seller.create("Copycat", "open@example.com"))


class TestOrderRepository:

    def test_list_by_customer(self):
        repo = InMemoryOrderRepository()
        customer_id = CustomerId.generate()
        mine = _make_order(customer_id)
        repo.save(mine)
        repo.save(_make_order())

        assert repo.list_by_customer(customer_id) == [mine]

    def test_list_by_status(self):
        repo = InMemoryOrderRepository()
        pending = _make_order()
        confirmed = _make_order()
        confirmed.confirm()
        repo.save(pending)
        repo.save(confirmed)

        assert repo.list_by_status(OrderStatus.PENDING) == [pending]
        assert repo.list_by_status(OrderStatus.CONFIRMED) == [confirmed]
        assert repo.list_by_status(OrderStatus.CANCELLED) == []
