"""Customer aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from cactus_shop.domain.exceptions import ValidationError
from cactus_shop.domain.model.identifiers import CustomerId
from cactus_shop.domain.model.value_objects import Address, Email, PhoneNumber


@dataclass(eq=False)
class Customer:
    """Aggregate root for shop customers.

    Contact details are value objects, so a Customer can never hold a
    malformed email or phone number.
    """

    id: CustomerId
    name: str
    email: Email
    phone: PhoneNumber
    address: Address

    @staticmethod
    def create(name: str, email: str, phone: str, address: Address) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name cannot be blank")
        return Customer(
            id=CustomerId.generate(),
            name=name.strip(),
            email=Email(email),
            phone=PhoneNumber(phone),
            address=address,
        )

    def update_address(self, new_address: Address) -> None:
        self.address = new_address

    def update_contact_info(self, new_email: str, new_phone: str) -> None:
        # Build both first so a bad phone leaves the email untouched.
        email = Email(new_email)
        phone = PhoneNumber(new_phone)
        self.email = email
        self.phone = phone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
