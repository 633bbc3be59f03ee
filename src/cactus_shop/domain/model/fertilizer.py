"""Fertilizer aggregate."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from cactus_shop.domain.exceptions import ValidationError
from cactus_shop.domain.model.cactus import CareLevel
from cactus_shop.domain.model.identifiers import FertilizerId
from cactus_shop.domain.model.value_objects import Money, Volume


@dataclass(eq=False)
class Fertilizer:
    """A fertilizer in the catalog, tagged with the care levels it suits."""

    id: FertilizerId
    name: str
    price: Money
    volume: Volume
    recommended_for: frozenset[CareLevel]

    @staticmethod
    def create(
        name: str,
        price: Money,
        volume_ml: int,
        recommended_for: Iterable[CareLevel],
    ) -> Fertilizer:
        if not name or not name.strip():
            raise ValidationError("Fertilizer name cannot be blank")
        levels = frozenset(recommended_for)
        if not levels:
            raise ValidationError(
                "Fertilizer must be recommended for at least one care level"
            )
        return Fertilizer(
            id=FertilizerId.generate(),
            name=name.strip(),
            price=price,
            volume=Volume(volume_ml),
            recommended_for=levels,
        )

    def is_recommended_for(self, care_level: CareLevel) -> bool:
        return care_level in self.recommended_for

    def update_price(self, new_price: Money) -> None:
        self.price = new_price

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fertilizer):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
