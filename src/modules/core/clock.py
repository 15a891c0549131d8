"""Time source used by the lifecycle core.

Services take a ``Clock`` in their constructor instead of calling
``timezone.now()`` directly so expiry windows and date checks can be pinned
in tests.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Protocol

from django.utils import timezone


class Clock(Protocol):
    def now(self) -> datetime: ...

    def today(self) -> date: ...


class SystemClock:
    """Wall clock, timezone-aware (``USE_TZ``), dates in ``TIME_ZONE``."""

    def now(self) -> datetime:
        return timezone.now()

    def today(self) -> date:
        return timezone.localdate()


class FixedClock:
    """Clock frozen at a given instant; ``advance`` moves it forward."""

    def __init__(self, instant: datetime) -> None:
        if timezone.is_naive(instant):
            instant = timezone.make_aware(instant)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def today(self) -> date:
        return timezone.localtime(self._instant).date()

    def advance(self, delta: timedelta) -> None:
        self._instant = self._instant + delta


system_clock = SystemClock()
