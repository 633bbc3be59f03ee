"""Abstract repository for Customer aggregate.

Email is the customer's natural key.  Uniqueness is enforced by the
repository itself through ``add()``, which must check and insert in one
step so two concurrent registrations cannot both succeed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cactus_shop.domain.model.customer import Customer
from cactus_shop.domain.model.identifiers import CustomerId
from cactus_shop.domain.model.value_objects import Email


class CustomerRepository(ABC):

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Insert a new customer.

        Raises AlreadyExistsError if the email is already taken.
        """

    @abstractmethod
    def get_by_id(self, customer_id: CustomerId) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: Email) -> Customer | None:
        """Return the customer registered with this email, or None."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer.

        Raises AlreadyExistsError if another customer owns the email.
        """

    @abstractmethod
    def delete(self, customer_id: CustomerId) -> bool:
        """Remove a customer. Return False if it was not stored."""

    @abstractmethod
    def exists(self, customer_id: CustomerId) -> bool:
        """Return True if a customer with this ID is stored."""
