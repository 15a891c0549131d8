"""Order service layer (use cases).

Every write runs in one transaction and moves the order through
``OrderStateMachine``; transitions lock the order row first so concurrent
requests and the expiry sweep serialise on it.

- ``create_order_link``: an empty CREATED order for a manager or agent,
  optionally pre-filled from one of its customers.
- ``place_order``: the customer fills in a link (public endpoint).
- ``mark_done`` / ``cancel_order``: close a placed order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

import structlog
from django.db import transaction

from modules.core.clock import Clock, system_clock
from modules.orders.constants import OrderStatus
from modules.orders.events import OrderCancelled, OrderCompleted, OrderPlaced
from modules.orders.exceptions import OrderFailureReason
from modules.orders.state_machine import OrderStateMachine
from modules.orders.validators import OrderValidators

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.customers.services import CustomerService
    from modules.orders.dtos import CreateOrderLinkDTO, PlaceOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use cases."""

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_service: Optional[CustomerService] = None,
        clock: Optional[Clock] = None,
        state_machine: Optional[OrderStateMachine] = None,
    ) -> None:
        self._order_repo = order_repository
        self._customers = customer_service
        self._clock = clock or system_clock
        self._machine = state_machine or OrderStateMachine(clock=self._clock)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order_link(
        self, manager_id: UUID, agent_id: Optional[UUID], dto: CreateOrderLinkDTO
    ) -> Order:
        """Create an empty order to share with a customer.

        Raises:
            ServiceException: ``NOT_FOUND`` when ``customer_id`` is not one
                of the caller's customers.
        """
        customer = None
        if dto.customer_id is not None and self._customers is not None:
            customer = self._customers.get_customer(manager_id, agent_id, str(dto.customer_id))

        order = self._order_repo.create_empty(
            manager_id=manager_id,
            agent_id=agent_id,
            created_at=self._clock.now(),
            customer=customer,
            notes=dto.notes,
        )
        logger.info(
            "order.link_created",
            order_id=str(order.id),
            manager_id=str(manager_id),
            agent_id=str(agent_id) if agent_id else None,
        )
        return order

    @transaction.atomic
    def place_order(self, order_id: str, dto: PlaceOrderDTO) -> Order:
        """Fill in a CREATED order and move it to PLACED.

        Raises:
            ServiceException: ``NOT_FOUND``; ``ILLEGAL_STATE_TRANSITION`` when
                the link is expired or no longer CREATED; ``VALIDATION_ERROR``
                for invalid details or an empty item list.
        """
        order = self._lock(order_id)
        log = logger.bind(order_id=str(order.id), current_status=order.status)

        self._machine.ensure(order, OrderStatus.PLACED, item_count=len(dto.items))
        OrderValidators.validate_place_order(dto, today=self._clock.today())

        self._order_repo.add_items(order, dto.items)
        order.customer_name = dto.customer_name
        order.customer_phone = dto.customer_phone
        order.customer_email = dto.customer_email
        order.customer_street_address = dto.customer_street_address
        order.customer_city = dto.customer_city
        order.delivery_date = dto.delivery_date
        order.notes = dto.notes or order.notes
        order.total_price = dto.total_price
        order.status = OrderStatus.PLACED
        order.placed_at = self._clock.now()
        order.record_event(self._event(OrderPlaced, order))
        self._order_repo.save(order)

        log.info("order.placed", item_count=len(dto.items), total_price=str(order.total_price))
        return self.get_order(order_id)

    @transaction.atomic
    def mark_done(self, manager_id: UUID, agent_id: Optional[UUID], order_id: str) -> Order:
        order = self._lock(order_id, manager_id, agent_id)
        self._machine.ensure(order, OrderStatus.DONE)

        order.status = OrderStatus.DONE
        order.completed_at = self._clock.now()
        order.record_event(self._event(OrderCompleted, order))
        self._order_repo.save(order)

        logger.info("order.done", order_id=str(order.id))
        return self.get_order(order_id)

    @transaction.atomic
    def cancel_order(self, manager_id: UUID, agent_id: Optional[UUID], order_id: str) -> Order:
        order = self._lock(order_id, manager_id, agent_id)
        self._machine.ensure(order, OrderStatus.CANCELLED)

        order.status = OrderStatus.CANCELLED
        order.record_event(self._event(OrderCancelled, order))
        self._order_repo.save(order)

        logger.info("order.cancelled", order_id=str(order.id))
        return self.get_order(order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        order = self._order_repo.get_by_id(str(order_id))
        if not order:
            raise OrderFailureReason.NOT_FOUND.exception(order_id=order_id)
        return order

    def get_order_for_owner(
        self, manager_id: UUID, agent_id: Optional[UUID], order_id: str
    ) -> Order:
        order = self.get_order(order_id)
        if not self._is_owner(order, manager_id, agent_id):
            raise OrderFailureReason.NOT_FOUND.exception(order_id=order_id, manager_id=manager_id)
        return order

    def list_orders(self, manager_id: UUID, agent_id: Optional[UUID] = None) -> QuerySet[Order]:
        return self._order_repo.owned_by(manager_id, agent_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _lock(
        self,
        order_id: str,
        manager_id: Optional[UUID] = None,
        agent_id: Optional[UUID] = None,
    ) -> Order:
        order = self._order_repo.get_for_update(str(order_id))
        if not order:
            raise OrderFailureReason.NOT_FOUND.exception(order_id=order_id)
        if manager_id is not None and not self._is_owner(order, manager_id, agent_id):
            # other tenants' orders are reported as missing
            raise OrderFailureReason.NOT_FOUND.exception(order_id=order_id, manager_id=manager_id)
        return order

    @staticmethod
    def _is_owner(order: Order, manager_id: UUID, agent_id: Optional[UUID]) -> bool:
        if str(order.manager_id) != str(manager_id):
            return False
        return agent_id is None or str(order.agent_id) == str(agent_id)

    @staticmethod
    def _event(event_class, order: Order):
        return event_class(
            aggregate_id=order.id,
            manager_id=order.manager_id,
            agent_id=order.agent_id,
        )
