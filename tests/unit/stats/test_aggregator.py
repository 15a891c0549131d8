"""Unit tests for StatsAggregator with stubbed repositories.

Covers:
- period defaults and validation, month bounds (December rollover).
- links created per manager / agent, zero-filled for idle agents.
- orders by status, zero-filled.
- monthly income and completed count from completed orders.
- yearly data bucketed by completion month.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.managers.models import Agent
from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.stats.services import StatsAggregator
from shared.domain.failures import ErrorKind, ServiceException

pytestmark = pytest.mark.unit

MANAGER_ID = uuid.uuid4()


def _done(total: str, completed_at: datetime) -> Order:
    return Order(
        id=uuid.uuid4(),
        status=OrderStatus.DONE,
        total_price=Decimal(total),
        completed_at=completed_at,
    )


@pytest.fixture()
def orders_repo():
    repo = MagicMock()
    repo.find_links_by_agent.return_value = {}
    repo.find_order_count_by_status.return_value = {}
    repo.find_orders_by_date_range.return_value = []
    return repo


@pytest.fixture()
def agents_repo():
    repo = MagicMock()
    repo.list_for_manager.return_value = []
    return repo


@pytest.fixture()
def aggregator(orders_repo, agents_repo, fixed_clock):
    return StatsAggregator(orders_repo, agents_repo, clock=fixed_clock)


# ---------------------------------------------------------------------------
# Periods
# ---------------------------------------------------------------------------


class TestPeriod:
    def test_defaults_to_clock_month(self, aggregator):
        assert aggregator.resolve_period() == (2024, 6)

    def test_explicit_period(self, aggregator):
        assert aggregator.resolve_period(2023, 12) == (2023, 12)

    @pytest.mark.parametrize("year, month", [(2024, 0), (2024, 13), (0, 5), (9999, 1)])
    def test_invalid_period(self, aggregator, year, month):
        with pytest.raises(ServiceException) as exc_info:
            aggregator.resolve_period(year, month)
        assert exc_info.value.kind == ErrorKind.VALIDATION_ERROR

    def test_december_rolls_into_next_year(self):
        start, end = StatsAggregator.month_bounds(2024, 12)
        assert (start.year, start.month) == (2024, 12)
        assert (end.year, end.month, end.day) == (2025, 1, 1)


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------


class TestLinksCreated:
    def test_manager_and_agent_links(self, aggregator, orders_repo, agents_repo):
        busy = Agent(id=uuid.uuid4(), first_name="Ana", last_name="Silva")
        idle = Agent(id=uuid.uuid4(), first_name="Rui", last_name="Lopes")
        agents_repo.list_for_manager.return_value = [busy, idle]
        orders_repo.find_links_by_agent.return_value = {None: 4, busy.id: 3}

        stats = aggregator.links_created_stats(MANAGER_ID, 2024, 6)

        assert stats.manager_links == 4
        assert stats.agent_links == 3
        assert stats.total == 7
        assert stats.links_per_agent[str(busy.id)].link_count == 3
        assert stats.links_per_agent[str(busy.id)].agent_name == "Ana Silva"
        assert stats.links_per_agent[str(idle.id)].link_count == 0

    def test_queries_month_window(self, aggregator, orders_repo):
        aggregator.links_created_stats(MANAGER_ID, 2024, 2)

        _, start, end = orders_repo.find_links_by_agent.call_args.args
        assert (start.month, start.day) == (2, 1)
        assert (end.month, end.day) == (3, 1)


# ---------------------------------------------------------------------------
# Orders and revenue
# ---------------------------------------------------------------------------


class TestOrdersAndRevenue:
    def test_orders_by_status_zero_filled(self, aggregator, orders_repo):
        orders_repo.find_order_count_by_status.return_value = {OrderStatus.PLACED: 2}

        counts = aggregator.orders_by_status(MANAGER_ID)

        assert counts == {
            "CREATED": 0,
            "PLACED": 2,
            "DONE": 0,
            "CANCELLED": 0,
            "EXPIRED": 0,
        }

    def test_monthly_income(self, aggregator, orders_repo):
        june = datetime(2024, 6, 10, tzinfo=dt_timezone.utc)
        orders_repo.find_orders_by_date_range.return_value = [
            _done("10.00", june),
            _done("5.50", june),
        ]

        assert aggregator.monthly_income(MANAGER_ID) == Decimal("15.50")
        assert aggregator.completed_orders_count(MANAGER_ID) == 2
        _, kwargs = orders_repo.find_orders_by_date_range.call_args
        assert kwargs["status"] == OrderStatus.DONE

    def test_empty_month(self, aggregator):
        assert aggregator.monthly_income(MANAGER_ID, 2024, 1) == Decimal("0.00")

    def test_yearly_data(self, aggregator, orders_repo):
        orders_repo.find_orders_by_date_range.return_value = [
            _done("10.00", datetime(2024, 1, 31, 23, 0, tzinfo=dt_timezone.utc)),
            _done("2.00", datetime(2024, 3, 1, 0, 0, tzinfo=dt_timezone.utc)),
            _done("3.00", datetime(2024, 3, 15, tzinfo=dt_timezone.utc)),
        ]

        data = aggregator.yearly_data(MANAGER_ID, 2024)

        assert [row.month for row in data] == list(range(1, 13))
        assert data[0].month_name == "January"
        assert data[0].revenue == Decimal("10.00")
        assert data[1].completed_orders == 0
        assert data[2].revenue == Decimal("5.00")
        assert data[2].completed_orders == 2

    def test_yearly_data_single_march_order(self, aggregator, orders_repo):
        orders_repo.find_orders_by_date_range.return_value = [
            _done("100.00", datetime(2024, 3, 20, tzinfo=dt_timezone.utc)),
        ]

        data = aggregator.yearly_data(MANAGER_ID, 2024)

        assert data[2].revenue == Decimal("100.00")
        assert data[2].completed_orders == 1
        others = [row for index, row in enumerate(data) if index != 2]
        assert len(others) == 11
        assert all(row.revenue == 0 and row.completed_orders == 0 for row in others)

    def test_snapshot_month_matches_yearly_entry(self, aggregator, orders_repo):
        june = datetime(2024, 6, 3, tzinfo=dt_timezone.utc)
        orders_repo.find_orders_by_date_range.side_effect = [
            [_done("100.00", june)],
            [_done("100.00", june), _done("40.00", june)],
        ]

        snapshot = aggregator.business_stats(MANAGER_ID)

        assert orders_repo.find_orders_by_date_range.call_count == 1
        assert snapshot.monthly_income == Decimal("100.00")
        assert snapshot.monthly_income == snapshot.yearly_data[5].revenue
        assert snapshot.completed_orders_count == snapshot.yearly_data[5].completed_orders == 1

    def test_business_stats_snapshot(self, aggregator):
        snapshot = aggregator.business_stats(MANAGER_ID)

        assert (snapshot.year, snapshot.month) == (2024, 6)
        assert snapshot.monthly_income == Decimal("0.00")
        assert snapshot.links_created_this_month.total == 0
        assert len(snapshot.yearly_data) == 12
