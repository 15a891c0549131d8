"""Expiry of stale order links.

A link that nobody filled in within the expiry window is moved to EXPIRED
by a single bulk ``UPDATE`` (see ``IOrderRepository.bulk_expire_empty_orders``).
Running it again right away matches nothing, since expired orders are no
longer CREATED.  A failed run is logged and left to the next scheduled tick;
no error reaches the caller.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

import structlog

from modules.core.clock import Clock, system_clock
from modules.orders.state_machine import expiry_window

if TYPE_CHECKING:
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class ExpirationSweep:
    def __init__(
        self,
        repository: IOrderRepository,
        clock: Optional[Clock] = None,
        window: Optional[timedelta] = None,
    ) -> None:
        self._repo = repository
        self._clock = clock or system_clock
        self._window = window

    def run(self) -> int:
        """Expire stale empty orders; returns the number expired (0 on failure)."""
        now = self._clock.now()
        window = self._window if self._window is not None else expiry_window()
        cutoff = now - window
        log = logger.bind(cutoff=cutoff.isoformat(), window_minutes=window.total_seconds() / 60)

        try:
            expired = self._repo.bulk_expire_empty_orders(created_before=cutoff, updated_at=now)
        except Exception:
            log.exception("orders.expiration_sweep.failed")
            return 0

        log.info("orders.expiration_sweep.completed", expired_count=expired)
        return expired
