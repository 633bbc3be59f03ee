"""Tests for CustomerService registration and profile updates."""

import pytest

from cactus_shop.application.customer_service import CustomerService
from cactus_shop.domain.exceptions import ErrorKind
from cactus_shop.domain.model.identifiers import CustomerId
from cactus_shop.domain.model.value_objects import Address, Email, PhoneNumber
from cactus_shop.infrastructure.persistence.in_memory_repositories import (
    InMemoryCustomerRepository,
)
from tests.fakes import make_address


class TestRegisterCustomer:

    def _setup(self):
        repo = InMemoryCustomerRepository()
        return CustomerService(repo), repo

    def test_happy_path(self):
        service, repo = self._setup()
        result = service.register_customer(
            "John Doe", "john@example.com", "+1234567890", make_address()
        )
        assert result.ok
        assert repo.get_by_id(result.value.id) == result.value

    def test_duplicate_email_rejected(self):
        service, repo = self._setup()
        service.register_customer("John Doe", "john@example.com", "+1234567890", make_address())

        result = service.register_customer(
            "Jane Doe", "john@example.com", "+0987654321", make_address()
        )

        assert result.error_kind is ErrorKind.ALREADY_EXISTS
        assert "already exists" in result.message
        assert len(repo.list_all()) == 1

    @pytest.mark.parametrize(
        "email, phone, fragment",
        [
            ("invalid-email", "+1234567890", "Invalid email format"),
            ("john@example.com", "123", "at least 10"),
        ],
    )
    def test_invalid_contact_rejected(self, email, phone, fragment):
        service, repo = self._setup()
        result = service.register_customer("John Doe", email, phone, make_address())
        assert result.error_kind is ErrorKind.VALIDATION_FAILED
        assert fragment in result.message
        assert repo.list_all() == []


class TestCustomerQueries:

    def _setup(self):
        service = CustomerService(InMemoryCustomerRepository())
        customer = service.register_customer(
            "John Doe", "john@example.com", "+1234567890", make_address()
        ).unwrap()
        return service, customer

    def test_get_by_id(self):
        service, customer = self._setup()
        assert service.get_customer(customer.id) == customer
        assert service.get_customer(CustomerId.generate()) is None

    def test_get_by_email(self):
        service, customer = self._setup()
        assert service.get_customer_by_email("john@example.com") == customer
        assert service.get_customer_by_email("nobody@example.com") is None

    def test_get_by_malformed_email_finds_nobody(self):
        service, _ = self._setup()
        assert service.get_customer_by_email("not-an-email") is None

    def test_list(self):
        service, customer = self._setup()
        assert service.list_customers() == [customer]


class TestUpdateCustomer:

    def _setup(self):
        repo = InMemoryCustomerRepository()
        service = CustomerService(repo)
        john = service.register_customer(
            "John Doe", "john@example.com", "+1234567890", make_address()
        ).unwrap()
        jane = service.register_customer(
            "Jane Doe", "jane@example.com", "+0987654321", make_address()
        ).unwrap()
        return service, repo, john, jane

    def test_update_address(self):
        service, repo, john, _ = self._setup()
        result = service.update_address(john.id, Address("1 Cactus Way", "Tucson", "85701"))
        assert result.ok
        assert repo.get_by_id(john.id).address.city == "Tucson"

    def test_update_contact_info(self):
        service, repo, john, _ = self._setup()
        result = service.update_contact_info(john.id, "johnny@example.com", "+1111111111")
        assert result.ok
        stored = repo.get_by_id(john.id)
        assert stored.email == Email("johnny@example.com")
        assert stored.phone == PhoneNumber("+1111111111")

    def test_keeping_own_email_is_allowed(self):
        service, _, john, _ = self._setup()
        assert service.update_contact_info(john.id, "john@example.com", "+1111111111").ok

    def test_taking_another_customers_email_fails(self):
        service, repo, john, _ = self._setup()

        result = service.update_contact_info(john.id, "jane@example.com", "+1111111111")

        assert result.error_kind is ErrorKind.ALREADY_EXISTS
        stored = repo.get_by_id(john.id)
        assert stored.email == Email("john@example.com")
        assert stored.phone == PhoneNumber("+1234567890")

    def test_invalid_phone_fails(self):
        service, _, john, _ = self._setup()
        result = service.update_contact_info(john.id, "john@example.com", "12")
        assert result.error_kind is ErrorKind.VALIDATION_FAILED

    def test_unknown_customer(self):
        service, *_ = self._setup()
        result = service.update_address(CustomerId.generate(), make_address())
        assert result.error_kind is ErrorKind.NOT_FOUND
        assert "Customer not found" in result.message


class TestDeleteCustomer:

    def test_delete_then_delete_again(self):
        service = CustomerService(InMemoryCustomerRepository())
        customer = service.register_customer(
            "John Doe", "john@example.com", "+1234567890", make_address()
        ).unwrap()

        assert service.delete_customer(customer.id) is True
        assert service.get_customer(customer.id) is None
        assert service.delete_customer(customer.id) is False

    def test_email_is_free_again_after_delete(self):
        service = CustomerService(InMemoryCustomerRepository())
        customer = service.register_customer(
            "John Doe", "john@example.com", "+1234567890", make_address()
        ).unwrap()
        service.delete_customer(customer.id)

        assert service.register_customer(
            "John Doe", "john@example.com", "+1234567890", make_address()
        ).ok
