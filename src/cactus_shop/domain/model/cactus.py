"""Cactus aggregate.

Cacti live independently of orders.  A cactus can be taken off sale
(marked unavailable) without being removed from the catalog; orders
placed earlier keep their own price snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cactus_shop.domain.exceptions import ValidationError
from cactus_shop.domain.model.identifiers import CactusId
from cactus_shop.domain.model.value_objects import Money


class CareLevel(Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


@dataclass(eq=False)
class Cactus:
    """A cactus in the catalog.

    Use ``Cactus.create()`` for new cacti.  The plain constructor is kept
    for reconstituting stored cacti and does not re-validate.
    """

    id: CactusId
    name: str
    price: Money
    care_level: CareLevel
    is_available: bool = True

    @staticmethod
    def create(name: str, price: Money, care_level: CareLevel) -> Cactus:
        if not name or not name.strip():
            raise ValidationError("Cactus name cannot be blank")
        return Cactus(
            id=CactusId.generate(),
            name=name.strip(),
            price=price,
            care_level=care_level,
        )

    def mark_as_unavailable(self) -> None:
        self.is_available = False

    def mark_as_available(self) -> None:
        self.is_available = True

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Existing orders are not affected; they captured a price snapshot
        when they were placed.
        """
        self.price = new_price

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cactus):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
