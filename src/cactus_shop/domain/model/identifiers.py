"""Opaque identifiers for the aggregate roots.

Each aggregate gets its own id type so a ``CactusId`` can never be passed
where an ``OrderId`` is expected.  Ids of different types never compare
equal, even when they wrap the same UUID.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import TypeVar

from cactus_shop.domain.exceptions import ValidationError

_IdT = TypeVar("_IdT", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    value: uuid.UUID

    @classmethod
    def generate(cls: type[_IdT]) -> _IdT:
        return cls(uuid.uuid4())

    @classmethod
    def from_string(cls: type[_IdT], raw: str) -> _IdT:
        try:
            return cls(uuid.UUID(raw))
        except (ValueError, AttributeError, TypeError) as exc:
            raise ValidationError(f"Invalid {cls.__name__}: {raw!r}") from exc

    def __str__(self) -> str:
        return str(self.value)


class CactusId(EntityId):
    pass


class CustomerId(EntityId):
    pass


class FertilizerId(EntityId):
    pass


class OrderId(EntityId):
    pass


class SellerId(EntityId):
    pass
