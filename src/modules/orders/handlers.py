"""Event handlers for order lifecycle events."""

from __future__ import annotations

import structlog

from modules.orders.events import OrderCancelled, OrderCompleted, OrderPlaced
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class OrderPlacedHandler(IEventHandler[OrderPlaced]):
    def handle(self, event: OrderPlaced) -> None:
        logger.info("order.event.placed", **event.as_log_context())


class OrderCompletedHandler(IEventHandler[OrderCompleted]):
    def handle(self, event: OrderCompleted) -> None:
        logger.info("order.event.completed", **event.as_log_context())


class OrderCancelledHandler(IEventHandler[OrderCancelled]):
    def handle(self, event: OrderCancelled) -> None:
        logger.info("order.event.cancelled", **event.as_log_context())


order_placed_handler = OrderPlacedHandler()
order_completed_handler = OrderCompletedHandler()
order_cancelled_handler = OrderCancelledHandler()
