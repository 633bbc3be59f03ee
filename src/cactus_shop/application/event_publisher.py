"""Port for publishing domain events.

Services call ``publish`` only after the aggregate that produced the
events has been saved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from cactus_shop.domain.model.events import DomainEvent


class EventPublisher(ABC):

    @abstractmethod
    def publish(self, events: Iterable[DomainEvent]) -> None:
        """Deliver the events, in order."""
