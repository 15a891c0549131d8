"""Order lifecycle rules.

``OrderStateMachine`` is the only place that decides whether an order may
move to another status.  ``check`` returns a ``FailureDescriptor`` (or
``None`` when the move is legal) without raising, so callers that only need
the answer, such as eligibility checks, do not use exceptions for control
flow.  ``ensure`` raises the same descriptor as a ``ServiceException``.

Guards:

- CREATED -> PLACED needs at least one line item.
- CREATED -> EXPIRED needs zero line items and an age above the expiry
  window.
- PLACED -> DONE | CANCELLED has no guard.
- DONE, CANCELLED and EXPIRED are terminal.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Optional

from django.conf import settings

from modules.core.clock import Clock, system_clock
from modules.orders.constants import (
    DEFAULT_EXPIRY_WINDOW_MINUTES,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    OrderStatus,
)
from modules.orders.exceptions import OrderFailureReason
from shared.domain.failures import FailureDescriptor, ServiceException

if TYPE_CHECKING:
    from modules.orders.models import Order


def expiry_window() -> timedelta:
    minutes = getattr(settings, "ORDER_EXPIRY_WINDOW_MINUTES", DEFAULT_EXPIRY_WINDOW_MINUTES)
    return timedelta(minutes=minutes)


class OrderStateMachine:
    def __init__(
        self, clock: Optional[Clock] = None, window: Optional[timedelta] = None
    ) -> None:
        self._clock = clock or system_clock
        self._window = window

    @property
    def window(self) -> timedelta:
        return self._window if self._window is not None else expiry_window()

    @staticmethod
    def allowed_targets(status: str) -> frozenset[str]:
        return VALID_TRANSITIONS.get(status, frozenset())

    @staticmethod
    def is_terminal(status: str) -> bool:
        return status in TERMINAL_STATES

    def is_expirable(self, created_at: datetime, item_count: int, now: datetime) -> bool:
        return item_count == 0 and now - created_at > self.window

    def check(
        self, order: Order, target: str, item_count: Optional[int] = None
    ) -> Optional[FailureDescriptor]:
        """Return the failure that forbids ``order -> target``, or ``None``.

        ``item_count`` defaults to the persisted line items; pass it when the
        items are about to be written in the same operation.
        """
        current = order.status
        context = {"order_id": order.id, "current": current, "target": target}

        if current == OrderStatus.EXPIRED:
            return OrderFailureReason.EXPIRED.failure(order_id=order.id, target=target)

        if target not in self.allowed_targets(current):
            if target in (OrderStatus.DONE, OrderStatus.CANCELLED):
                return OrderFailureReason.NOT_PLACED.failure(**context)
            return OrderFailureReason.INVALID_STATUS.failure(**context)

        if target == OrderStatus.PLACED:
            if self._item_count(order, item_count) < 1:
                return OrderFailureReason.NO_ITEMS.failure(order_id=order.id)

        if target == OrderStatus.EXPIRED:
            count = self._item_count(order, item_count)
            if not self.is_expirable(order.created_at, count, self._clock.now()):
                return OrderFailureReason.NOT_EXPIRABLE.failure(
                    order_id=order.id,
                    item_count=count,
                    created_at=order.created_at.isoformat(),
                )

        return None

    def ensure(self, order: Order, target: str, item_count: Optional[int] = None) -> None:
        failure = self.check(order, target, item_count=item_count)
        if failure is not None:
            raise ServiceException(failure)

    @staticmethod
    def _item_count(order: Order, item_count: Optional[int]) -> int:
        if item_count is not None:
            return item_count
        return order.items.count()
