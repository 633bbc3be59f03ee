"""Abstract repository for Seller aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cactus_shop.domain.model.identifiers import SellerId
from cactus_shop.domain.model.seller import Seller
from cactus_shop.domain.model.value_objects import Email


class SellerRepository(ABC):

    @abstractmethod
    def add(self, seller: Seller) -> None:
        """Insert a new seller.

        Raises AlreadyExistsError if the contact email is already taken.
        """

    @abstractmethod
    def get_by_id(self, seller_id: SellerId) -> Seller | None:
        """Return a seller by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: Email) -> Seller | None:
        """Return the seller with this contact email, or None."""

    @abstractmethod
    def list_active(self) -> list[Seller]:
        """Return every seller that is currently active."""

    @abstractmethod
    def list_all(self) -> list[Seller]:
        """Return every seller."""

    @abstractmethod
    def save(self, seller: Seller) -> None:
        """Persist a new or updated seller.

        Raises AlreadyExistsError if another seller owns the contact email.
        """

    @abstractmethod
    def delete(self, seller_id: SellerId) -> bool:
        """Remove a seller. Return False if it was not stored."""

    @abstractmethod
    def exists(self, seller_id: SellerId) -> bool:
        """Return True if a seller with this ID is stored."""
