"""Business statistics API (manager only).

Every endpoint accepts optional ``year`` and ``month`` query parameters and
defaults to the current month.
"""

from __future__ import annotations

from typing import Optional, Tuple

from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.identity import resolve_identity
from modules.managers.repositories.django_repository import AgentDjangoRepository
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.stats.exceptions import StatsFailureReason
from modules.stats.services import StatsAggregator


def _period(request: Request) -> Tuple[Optional[int], Optional[int]]:
    raw_year = request.query_params.get("year")
    raw_month = request.query_params.get("month")
    try:
        year = int(raw_year) if raw_year else None
        month = int(raw_month) if raw_month else None
    except ValueError:
        raise StatsFailureReason.INVALID_PERIOD.exception(year=raw_year, month=raw_month) from None
    return year, month


class BusinessStatsViewSet(ViewSet):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._stats = StatsAggregator(
            order_repository=OrderDjangoRepository(),
            agent_repository=AgentDjangoRepository(),
        )

    def _manager_id(self, request: Request):
        identity = resolve_identity(request)
        if identity.is_agent:
            raise PermissionDenied("Only managers can view business statistics.")
        return identity.manager_id

    def list(self, request: Request) -> Response:
        """GET /api/v1/business-stats/"""
        year, month = _period(request)
        snapshot = self._stats.business_stats(self._manager_id(request), year, month)
        return Response(snapshot.model_dump(mode="json"))

    @action(detail=False, methods=["get"], url_path="links-created")
    def links_created(self, request: Request) -> Response:
        year, month = _period(request)
        stats = self._stats.links_created_stats(self._manager_id(request), year, month)
        return Response(stats.model_dump(mode="json"))

    @action(detail=False, methods=["get"], url_path="orders-by-status")
    def orders_by_status(self, request: Request) -> Response:
        return Response(self._stats.orders_by_status(self._manager_id(request)))

    @action(detail=False, methods=["get"], url_path="monthly-income")
    def monthly_income(self, request: Request) -> Response:
        year, month = _period(request)
        manager_id = self._manager_id(request)
        year, month = self._stats.resolve_period(year, month)
        return Response(
            {
                "year": year,
                "month": month,
                "monthly_income": str(self._stats.monthly_income(manager_id, year, month)),
                "completed_orders_count": self._stats.completed_orders_count(
                    manager_id, year, month
                ),
            }
        )

    @action(detail=False, methods=["get"], url_path="yearly-data")
    def yearly_data(self, request: Request) -> Response:
        year, _ = _period(request)
        data = self._stats.yearly_data(self._manager_id(request), year)
        return Response([entry.model_dump(mode="json") for entry in data])
