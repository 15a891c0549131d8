"""Order domain constants.

Status choices and the transition table used by ``OrderStateMachine``.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    CREATED = "CREATED", "Created"
    PLACED = "PLACED", "Placed"
    DONE = "DONE", "Done"
    CANCELLED = "CANCELLED", "Cancelled"
    EXPIRED = "EXPIRED", "Expired"


VALID_TRANSITIONS: dict[str, frozenset[str]] = {
    OrderStatus.CREATED: frozenset({OrderStatus.PLACED, OrderStatus.EXPIRED}),
    OrderStatus.PLACED: frozenset({OrderStatus.DONE, OrderStatus.CANCELLED}),
    OrderStatus.DONE: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
    OrderStatus.EXPIRED: frozenset(),
}

TERMINAL_STATES: frozenset[str] = frozenset(
    status for status, targets in VALID_TRANSITIONS.items() if not targets
)

DEFAULT_EXPIRY_WINDOW_MINUTES = 60
DEFAULT_MAX_PAGE_SIZE = 100
