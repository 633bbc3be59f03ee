"""Abstract repository for Cactus aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cactus_shop.domain.model.cactus import Cactus
from cactus_shop.domain.model.identifiers import CactusId


class CactusRepository(ABC):

    @abstractmethod
    def get_by_id(self, cactus_id: CactusId) -> Cactus | None:
        """Return a cactus by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Cactus]:
        """Return every cactus in the catalog."""

    @abstractmethod
    def save(self, cactus: Cactus) -> None:
        """Persist a new or updated cactus."""

    @abstractmethod
    def delete(self, cactus_id: CactusId) -> bool:
        """Remove a cactus. Return False if it was not stored."""

    @abstractmethod
    def exists(self, cactus_id: CactusId) -> bool:
        """Return True if a cactus with this ID is stored."""
