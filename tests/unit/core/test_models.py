"""Unit tests for BaseModel behaviour and the clock.

Exercised through ``Manager``, the simplest concrete subclass.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta, timezone as dt_timezone

import pytest
from freezegun import freeze_time

from modules.core.clock import FixedClock, system_clock

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class TestBaseModel:
    def test_id_is_uuid_version_7(self, manager):
        assert isinstance(manager.id, uuid.UUID)
        assert manager.id.version == 7

    def test_ids_are_time_ordered(self, manager_factory):
        first = manager_factory(email="first@example.com")
        second = manager_factory(email="second@example.com")
        assert str(first.id) < str(second.id)

    def test_timestamps_default_to_now(self, manager_factory):
        with freeze_time("2024-03-01 09:30:00"):
            manager = manager_factory()
        expected = datetime(2024, 3, 1, 9, 30, tzinfo=dt_timezone.utc)
        assert manager.created_at == expected
        assert manager.updated_at == expected

    def test_explicit_created_at_is_kept(self, manager_factory):
        stamp = datetime(2020, 1, 1, tzinfo=dt_timezone.utc)
        manager = manager_factory(created_at=stamp)
        manager.refresh_from_db()
        assert manager.created_at == stamp

    def test_update_fields_refresh_updated_at(self, manager_factory):
        with freeze_time("2024-03-01 09:30:00"):
            manager = manager_factory()
        with freeze_time("2024-03-01 09:35:00"):
            manager.city = "Porto"
            manager.save(update_fields=["city"])

        manager.refresh_from_db()
        assert manager.city == "Porto"
        assert manager.updated_at == manager.created_at + timedelta(minutes=5)

    def test_created_at_not_changed_by_save(self, manager):
        created = manager.created_at
        manager.city = "Faro"
        manager.save()
        manager.refresh_from_db()
        assert manager.created_at == created


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


class TestClock:
    @freeze_time("2024-06-15 23:30:00")
    def test_system_clock_follows_wall_time(self):
        assert system_clock.now() == datetime(2024, 6, 15, 23, 30, tzinfo=dt_timezone.utc)
        assert system_clock.today() == date(2024, 6, 15)

    def test_fixed_clock_advance(self, fixed_clock):
        start = fixed_clock.now()
        fixed_clock.advance(timedelta(days=1))
        assert fixed_clock.now() - start == timedelta(days=1)
        assert fixed_clock.today() == date(2024, 6, 16)

    def test_naive_instant_is_made_aware(self):
        clock = FixedClock(datetime(2024, 1, 1, 8, 0))
        assert clock.now().tzinfo is not None
