"""Per-owner customer cap.

The count is read by the caller right before the check and no lock is held
between the two, so concurrent creations can overshoot the cap by a few
rows.  The cap is a soft bound.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from django.conf import settings

from modules.customers.exceptions import CustomerFailureReason

MAX_CUSTOMER_CAP = 100


def max_customer_cap() -> int:
    return getattr(settings, "MAX_CUSTOMER_CAP", MAX_CUSTOMER_CAP)


def validate_customers_cap(
    current_count: int,
    manager_id: UUID | str,
    agent_id: Optional[UUID | str],
    cap: Optional[int] = None,
) -> None:
    """Raise ``CAPACITY_EXCEEDED`` when the owner already holds ``cap`` customers."""
    cap = max_customer_cap() if cap is None else cap
    if current_count >= cap:
        raise CustomerFailureReason.CUSTOMER_LIMIT_EXCEEDED.exception(
            cap=cap, manager_id=manager_id, agent_id=agent_id
        )
