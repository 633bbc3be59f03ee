"""Application service: customer registration and profile use cases."""

from __future__ import annotations

import logging

from cactus_shop.application.result import ServiceResult, service_err, service_ok
from cactus_shop.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from cactus_shop.domain.model.customer import Customer
from cactus_shop.domain.model.identifiers import CustomerId
from cactus_shop.domain.model.value_objects import Address, Email
from cactus_shop.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def register_customer(
        self,
        name: str,
        email: str,
        phone: str,
        address: Address,
    ) -> ServiceResult[Customer]:
        """Register a new customer.

        The email must not belong to anyone yet.  The repository checks
        and inserts in one step, so a concurrent registration with the
        same email fails with AlreadyExistsError.
        """
        try:
            customer = Customer.create(name, email, phone, address)
            self._customer_repo.add(customer)
        except DomainException as exc:
            logger.debug("Registration for %r rejected: %s", email, exc)
            return service_err(exc)

        logger.info("Registered customer %s", customer.id)
        return service_ok(customer)

    def get_customer(self, customer_id: CustomerId) -> Customer | None:
        return self._customer_repo.get_by_id(customer_id)

    def get_customer_by_email(self, email: str) -> Customer | None:
        """Look up by email; a malformed email simply finds nobody."""
        try:
            return self._customer_repo.get_by_email(Email(email))
        except ValidationError:
            return None

    def list_customers(self) -> list[Customer]:
        return self._customer_repo.list_all()

    def update_address(
        self, customer_id: CustomerId, new_address: Address
    ) -> ServiceResult[Customer]:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            return service_err(EntityNotFoundError(f"Customer not found: {customer_id}"))

        customer.update_address(new_address)
        self._customer_repo.save(customer)
        return service_ok(customer)

    def update_contact_info(
        self, customer_id: CustomerId, new_email: str, new_phone: str
    ) -> ServiceResult[Customer]:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            return service_err(EntityNotFoundError(f"Customer not found: {customer_id}"))

        try:
            customer.update_contact_info(new_email, new_phone)
            self._customer_repo.save(customer)
        except DomainException as exc:
            logger.debug("Contact update for %s rejected: %s", customer_id, exc)
            return service_err(exc)

        return service_ok(customer)

    def delete_customer(self, customer_id: CustomerId) -> bool:
        return self._customer_repo.delete(customer_id)
