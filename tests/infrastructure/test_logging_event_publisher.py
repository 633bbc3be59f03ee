"""Tests for LoggingEventPublisher."""

import logging
from datetime import datetime, timezone

from cactus_shop.domain.model.events import OrderConfirmed, OrderCreated
from cactus_shop.domain.model.identifiers import CustomerId, OrderId
from cactus_shop.infrastructure.messaging.logging_event_publisher import (
    LoggingEventPublisher,
)

_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestLoggingEventPublisher:

    def test_one_info_record_per_event(self, caplog):
        order_id = OrderId.generate()
        events = [
            OrderCreated(order_id, _NOW, CustomerId.generate()),
            OrderConfirmed(order_id, _NOW),
        ]

        with caplog.at_level(logging.INFO, logger="cactus_shop.events"):
            LoggingEventPublisher().publish(events)

        assert [r.levelno for r in caplog.records] == [logging.INFO, logging.INFO]
        assert "OrderCreated" in caplog.records[0].getMessage()
        assert str(order_id) in caplog.records[1].getMessage()

    def test_custom_logger_name(self, caplog):
        with caplog.at_level(logging.INFO, logger="audit"):
            LoggingEventPublisher("audit").publish([OrderConfirmed(OrderId.generate(), _NOW)])

        assert [r.name for r in caplog.records] == ["audit"]

    def test_nothing_to_publish(self, caplog):
        with caplog.at_level(logging.INFO):
            LoggingEventPublisher().publish([])
        assert caplog.records == []
