"""Order repository interface.

Extends ``IRepository[Order]`` with the lifecycle operations (empty-order
creation, row locking, line items), the bulk expiry used by the sweep, and
the read models the stats aggregation is built from.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.orders.dtos import PlaceOrderItemDTO
    from modules.orders.models import Order, OrderItem


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def create_empty(
        self,
        manager_id: UUID,
        agent_id: Optional[UUID],
        created_at: datetime,
        customer: Any = None,
        notes: str = "",
    ) -> Order:
        """Insert a CREATED order with no line items."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order holding a row lock until the transaction ends."""

    @abstractmethod
    def owned_by(
        self, manager_id: UUID, agent_id: Optional[UUID] = None
    ) -> "QuerySet[Order]":
        """Orders visible to a manager, or only those created by one agent."""

    @abstractmethod
    def add_items(self, order: Order, items: Sequence[PlaceOrderItemDTO]) -> List[OrderItem]:
        """Write line items for an order."""

    @abstractmethod
    def bulk_expire_empty_orders(self, created_before: datetime, updated_at: datetime) -> int:
        """Expire every CREATED order without items created before the cutoff.

        One statement; returns the affected row count.
        """

    @abstractmethod
    def find_order_count_by_status(self, manager_id: UUID) -> Dict[str, int]:
        """Count of the manager's orders per status (statuses with orders only)."""

    @abstractmethod
    def find_orders_by_date_range(
        self, manager_id: UUID, start: datetime, end: datetime, status: Optional[str] = None
    ) -> List[Order]:
        """Orders completed (``status=DONE``) or created in ``[start, end)``.

        With ``status=DONE`` the range applies to ``completed_at``, otherwise
        to ``created_at``.
        """

    @abstractmethod
    def find_links_by_agent(
        self, manager_id: UUID, start: datetime, end: datetime
    ) -> Dict[Optional[UUID], int]:
        """Links created in ``[start, end)`` keyed by agent id (``None`` = manager)."""
