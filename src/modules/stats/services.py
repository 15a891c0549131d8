"""Business statistics for a manager.

Aggregation runs over rows returned by the order and agent repositories,
so results are deterministic for a given dataset and clock.  Month
boundaries are computed in the current Django time zone.  Nothing here is
cached; every call reads fresh data.

Revenue is attributed to the month in which an order was completed
(``completed_at``), not when it was created.
"""

from __future__ import annotations

import calendar
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional, Tuple
from uuid import UUID

import structlog
from django.utils import timezone

from modules.core.clock import Clock, system_clock
from modules.orders.constants import OrderStatus
from modules.stats.dtos import (
    AgentLinkInfoDTO,
    BusinessStatsDTO,
    LinksCreatedStatsDTO,
    MonthlyDataDTO,
)
from modules.stats.exceptions import StatsFailureReason

if TYPE_CHECKING:
    from modules.managers.repositories.interfaces import IAgentRepository
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)

ZERO = Decimal("0.00")


class StatsAggregator:
    def __init__(
        self,
        order_repository: IOrderRepository,
        agent_repository: IAgentRepository,
        clock: Optional[Clock] = None,
    ) -> None:
        self._orders = order_repository
        self._agents = agent_repository
        self._clock = clock or system_clock

    # ------------------------------------------------------------------
    # Period helpers
    # ------------------------------------------------------------------

    def resolve_period(self, year: Optional[int] = None, month: Optional[int] = None) -> Tuple[int, int]:
        """Default to the clock's current year and month."""
        today = self._clock.today()
        year = today.year if year is None else year
        month = today.month if month is None else month
        if not (1 <= month <= 12 and 1 <= year <= 9998):
            raise StatsFailureReason.INVALID_PERIOD.exception(year=year, month=month)
        return year, month

    @staticmethod
    def month_bounds(year: int, month: int) -> Tuple[datetime, datetime]:
        start = timezone.make_aware(datetime(year, month, 1))
        if month == 12:
            end = timezone.make_aware(datetime(year + 1, 1, 1))
        else:
            end = timezone.make_aware(datetime(year, month + 1, 1))
        return start, end

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def links_created_stats(
        self, manager_id: UUID, year: Optional[int] = None, month: Optional[int] = None
    ) -> LinksCreatedStatsDTO:
        year, month = self.resolve_period(year, month)
        start, end = self.month_bounds(year, month)
        counts = self._orders.find_links_by_agent(manager_id, start, end)

        manager_links = counts.get(None, 0)
        agent_links = sum(count for agent_id, count in counts.items() if agent_id is not None)

        per_agent = {}
        for agent in self._agents.list_for_manager(manager_id):
            per_agent[str(agent.id)] = AgentLinkInfoDTO(
                agent_id=agent.id,
                agent_name=f"{agent.first_name} {agent.last_name}",
                link_count=counts.get(agent.id, 0),
            )

        return LinksCreatedStatsDTO(
            manager_links=manager_links,
            agent_links=agent_links,
            total=manager_links + agent_links,
            links_per_agent=per_agent,
        )

    def orders_by_status(self, manager_id: UUID) -> dict[str, int]:
        counts = self._orders.find_order_count_by_status(manager_id)
        return {status: counts.get(status, 0) for status in OrderStatus.values}

    def monthly_income(
        self, manager_id: UUID, year: Optional[int] = None, month: Optional[int] = None
    ) -> Decimal:
        return sum(
            (order.total_price for order in self._completed_in_month(manager_id, year, month)),
            ZERO,
        )

    def completed_orders_count(
        self, manager_id: UUID, year: Optional[int] = None, month: Optional[int] = None
    ) -> int:
        return len(self._completed_in_month(manager_id, year, month))

    def yearly_data(self, manager_id: UUID, year: Optional[int] = None) -> List[MonthlyDataDTO]:
        year, _ = self.resolve_period(year, None)
        start, _ = self.month_bounds(year, 1)
        _, end = self.month_bounds(year, 12)

        revenue = {month: ZERO for month in range(1, 13)}
        completed = {month: 0 for month in range(1, 13)}
        for order in self._orders.find_orders_by_date_range(
            manager_id, start, end, status=OrderStatus.DONE
        ):
            month = timezone.localtime(order.completed_at).month
            revenue[month] += order.total_price
            completed[month] += 1

        return [
            MonthlyDataDTO(
                month=month,
                month_name=calendar.month_name[month],
                revenue=revenue[month],
                completed_orders=completed[month],
            )
            for month in range(1, 13)
        ]

    def business_stats(
        self, manager_id: UUID, year: Optional[int] = None, month: Optional[int] = None
    ) -> BusinessStatsDTO:
        """Full snapshot.

        The month figures are taken from the yearly series so that both come
        from the same read of DONE orders.
        """
        year, month = self.resolve_period(year, month)
        yearly = self.yearly_data(manager_id, year)
        current = yearly[month - 1]
        snapshot = BusinessStatsDTO(
            year=year,
            month=month,
            links_created_this_month=self.links_created_stats(manager_id, year, month),
            orders_by_status=self.orders_by_status(manager_id),
            monthly_income=current.revenue,
            completed_orders_count=current.completed_orders,
            yearly_data=yearly,
        )
        logger.info("stats.business_stats_computed", manager_id=str(manager_id), year=year, month=month)
        return snapshot

    def _completed_in_month(
        self, manager_id: UUID, year: Optional[int], month: Optional[int]
    ) -> List[Order]:
        year, month = self.resolve_period(year, month)
        start, end = self.month_bounds(year, month)
        return self._orders.find_orders_by_date_range(
            manager_id, start, end, status=OrderStatus.DONE
        )
