"""EventPublisher that writes domain events to the logging system.

There is no message bus in the shop; logging is the side channel for
domain events.  Each event becomes one INFO record on the configured
event logger.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cactus_shop.application.event_publisher import EventPublisher
from cactus_shop.domain.model.events import DomainEvent


class LoggingEventPublisher(EventPublisher):

    def __init__(self, logger_name: str = "cactus_shop.events") -> None:
        self._logger = logging.getLogger(logger_name)

    def publish(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            self._logger.info(
                "Domain event: %s order=%s at=%s",
                event.name,
                event.order_id,
                event.occurred_at.isoformat(),
            )
