"""Unit tests for domain events recorded on aggregates and the in-process bus."""

from __future__ import annotations

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from modules.orders.events import OrderCancelled, OrderPlaced
from modules.orders.models import Order
from shared.infrastructure.bus import InMemoryEventBus

pytestmark = pytest.mark.unit


def test_order_records_and_pulls_events():
    order = Order(manager_id=uuid4())
    assert order.pending_events == []

    event = OrderPlaced(aggregate_id=order.id, manager_id=order.manager_id)
    order.record_event(event)

    assert order.pending_events == [event]
    assert event.event_name == "OrderPlaced"
    assert order.pull_events() == [event]
    assert order.pending_events == []


def test_log_context_is_flat_strings():
    event = OrderCancelled(aggregate_id=uuid4(), manager_id=uuid4())
    context = event.as_log_context()

    assert context["event_name"] == "OrderCancelled"
    assert context["agent_id"] == "None"
    assert all(isinstance(value, str) for value in context.values())


class TestInMemoryEventBus:
    def test_dispatches_by_event_type(self):
        bus = InMemoryEventBus()
        placed_handler, cancelled_handler = MagicMock(), MagicMock()
        bus.subscribe(OrderPlaced, placed_handler)
        bus.subscribe(OrderCancelled, cancelled_handler)

        event = OrderPlaced(aggregate_id=uuid4(), manager_id=uuid4())
        bus.publish(event)

        placed_handler.handle.assert_called_once_with(event)
        cancelled_handler.handle.assert_not_called()

    def test_subscribing_twice_registers_once(self):
        bus = InMemoryEventBus()
        handler = MagicMock()
        bus.subscribe(OrderPlaced, handler)
        bus.subscribe(OrderPlaced, handler)

        bus.publish(OrderPlaced(aggregate_id=uuid4(), manager_id=uuid4()))

        handler.handle.assert_called_once()

    def test_failing_handler_does_not_stop_others(self):
        bus = InMemoryEventBus()
        failing, healthy = MagicMock(), MagicMock()
        failing.handle.side_effect = RuntimeError("boom")
        bus.subscribe(OrderPlaced, failing)
        bus.subscribe(OrderPlaced, healthy)

        bus.publish(OrderPlaced(aggregate_id=uuid4(), manager_id=uuid4()))

        healthy.handle.assert_called_once()
