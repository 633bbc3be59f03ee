"""Seller aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from cactus_shop.domain.exceptions import InvalidStateError, ValidationError
from cactus_shop.domain.model.identifiers import SellerId
from cactus_shop.domain.model.value_objects import Email


@dataclass(eq=False)
class Seller:
    """A store selling through the shop.

    Sellers start active.  Activation toggles are strict: deactivating an
    inactive seller (or activating an active one) is an error, not a no-op.
    """

    id: SellerId
    store_name: str
    contact_email: Email
    is_active: bool = True

    @staticmethod
    def create(store_name: str, contact_email: str) -> Seller:
        if not store_name or not store_name.strip():
            raise ValidationError("Store name cannot be blank")
        return Seller(
            id=SellerId.generate(),
            store_name=store_name.strip(),
            contact_email=Email(contact_email),
        )

    def deactivate(self) -> None:
        if not self.is_active:
            raise InvalidStateError("Seller is already inactive")
        self.is_active = False

    def activate(self) -> None:
        if self.is_active:
            raise InvalidStateError("Seller is already active")
        self.is_active = True

    def update_contact_email(self, new_email: str) -> None:
        self.contact_email = Email(new_email)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seller):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
