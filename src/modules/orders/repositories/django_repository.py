"""Django ORM implementation of the Order repository.

Status changes on a single order happen on a row locked with
``select_for_update()``.  The expiry sweep is a single ``UPDATE`` so no
order is read and then written separately.  Events recorded on an order are
published on the in-process bus after the surrounding transaction commits.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count, Exists, OuterRef, QuerySet

from modules.orders.constants import OrderStatus
from modules.orders.dtos import PlaceOrderItemDTO
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository
from shared.infrastructure.bus import event_bus

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_empty(
        self,
        manager_id: UUID,
        agent_id: Optional[UUID],
        created_at: datetime,
        customer: Any = None,
        notes: str = "",
    ) -> Order:
        order = Order(
            manager_id=manager_id,
            agent_id=agent_id,
            status=OrderStatus.CREATED,
            notes=notes,
            created_at=created_at,
        )
        if customer is not None:
            order.customer = customer
            order.customer_name = customer.name
            order.customer_phone = customer.phone_number
            order.customer_email = customer.email
            order.customer_street_address = customer.street_address
            order.customer_city = customer.city
        order.save()
        return order

    @transaction.atomic
    def add_items(self, order: Order, items: Sequence[PlaceOrderItemDTO]) -> List[OrderItem]:
        created = []
        for item_dto in items:
            item = OrderItem(
                order=order,
                product_id=item_dto.product_id,
                product_name=item_dto.product_name,
                quantity=item_dto.quantity,
                unit_price=item_dto.unit_price,
            )
            item.save()
            created.append(item)
        return created

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Returns ``None`` for non-existent or malformed IDs."""
        try:
            return Order.objects.prefetch_related("items").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[Order]:
        try:
            return Order.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        queryset = Order.objects.prefetch_related("items")
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def owned_by(self, manager_id: UUID, agent_id: Optional[UUID] = None) -> QuerySet[Order]:
        queryset = Order.objects.prefetch_related("items").filter(manager_id=manager_id)
        if agent_id is not None:
            queryset = queryset.filter(agent_id=agent_id)
        return queryset

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        entity.save()
        events = entity.pull_events()
        if events:
            transaction.on_commit(lambda: event_bus.publish_all(events))
        logger.info("order.saved", order_id=str(entity.id), status=entity.status, event_count=len(events))
        return entity

    # ------------------------------------------------------------------
    # Sweep
    # ------------------------------------------------------------------

    def bulk_expire_empty_orders(self, created_before: datetime, updated_at: datetime) -> int:
        has_items = OrderItem.objects.filter(order=OuterRef("pk"))
        with transaction.atomic():
            return (
                Order.objects.filter(status=OrderStatus.CREATED, created_at__lt=created_before)
                .filter(~Exists(has_items))
                .update(status=OrderStatus.EXPIRED, updated_at=updated_at)
            )

    # ------------------------------------------------------------------
    # Stats read models
    # ------------------------------------------------------------------

    def find_order_count_by_status(self, manager_id: UUID) -> Dict[str, int]:
        rows = (
            Order.objects.filter(manager_id=manager_id)
            .order_by()
            .values("status")
            .annotate(count=Count("id"))
        )
        return {row["status"]: row["count"] for row in rows}

    def find_orders_by_date_range(
        self, manager_id: UUID, start: datetime, end: datetime, status: Optional[str] = None
    ) -> List[Order]:
        queryset = Order.objects.filter(manager_id=manager_id)
        if status == OrderStatus.DONE:
            queryset = queryset.filter(
                status=OrderStatus.DONE, completed_at__gte=start, completed_at__lt=end
            )
        else:
            queryset = queryset.filter(created_at__gte=start, created_at__lt=end)
            if status:
                queryset = queryset.filter(status=status)
        return list(queryset.order_by("created_at"))

    def find_links_by_agent(
        self, manager_id: UUID, start: datetime, end: datetime
    ) -> Dict[Optional[UUID], int]:
        rows = (
            Order.objects.filter(manager_id=manager_id, created_at__gte=start, created_at__lt=end)
            .order_by()
            .values("agent_id")
            .annotate(count=Count("id"))
        )
        return {row["agent_id"]: row["count"] for row in rows}
