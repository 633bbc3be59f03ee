"""Abstract repository for Fertilizer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cactus_shop.domain.model.fertilizer import Fertilizer
from cactus_shop.domain.model.identifiers import FertilizerId


class FertilizerRepository(ABC):

    @abstractmethod
    def get_by_id(self, fertilizer_id: FertilizerId) -> Fertilizer | None:
        """Return a fertilizer by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Fertilizer]:
        """Return every fertilizer in the catalog."""

    @abstractmethod
    def save(self, fertilizer: Fertilizer) -> None:
        """Persist a new or updated fertilizer."""

    @abstractmethod
    def delete(self, fertilizer_id: FertilizerId) -> bool:
        """Remove a fertilizer. Return False if it was not stored."""

    @abstractmethod
    def exists(self, fertilizer_id: FertilizerId) -> bool:
        """Return True if a fertilizer with this ID is stored."""
