"""Customer notifications for order lifecycle changes.

Only eligibility is decided here: the order must be in the status the
notification announces and must carry a recipient email.  Delivery goes
through Django's mail API (``EMAIL_BACKEND``).
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Optional

import structlog
from django.conf import settings
from django.core.mail import send_mail

from modules.orders.constants import OrderStatus
from modules.orders.exceptions import NotificationFailureReason
from shared.domain.failures import FailureDescriptor, ServiceException

if TYPE_CHECKING:
    from modules.orders.models import Order

logger = structlog.get_logger(__name__)


class NotificationKind(StrEnum):
    PLACED = "placed"
    DONE = "done"
    CANCELLED = "cancelled"


REQUIRED_STATUS = {
    NotificationKind.PLACED: OrderStatus.PLACED,
    NotificationKind.DONE: OrderStatus.DONE,
    NotificationKind.CANCELLED: OrderStatus.CANCELLED,
}

SUBJECTS = {
    NotificationKind.PLACED: "Your order has been placed",
    NotificationKind.DONE: "Your order is ready",
    NotificationKind.CANCELLED: "Your order has been cancelled",
}


class OrderNotificationService:
    def check_eligibility(
        self, order: Order, kind: NotificationKind
    ) -> Optional[FailureDescriptor]:
        required = REQUIRED_STATUS[kind]
        if order.status != required:
            return NotificationFailureReason.ORDER_NOT_PLACED.failure(
                order_id=order.id, current=order.status, kind=kind.value, required=required
            )
        if not (order.customer_email or "").strip():
            return NotificationFailureReason.ORDER_EMAIL_NOT_AVAILABLE.failure(order_id=order.id)
        return None

    def notify(self, order: Order, kind: NotificationKind) -> None:
        failure = self.check_eligibility(order, kind)
        if failure is not None:
            raise ServiceException(failure)

        send_mail(
            subject=SUBJECTS[kind],
            message=self._body(order, kind),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[order.customer_email],
        )
        logger.info("order.notification_sent", order_id=str(order.id), kind=kind.value)

    @staticmethod
    def _body(order: Order, kind: NotificationKind) -> str:
        greeting = f"Hello {order.customer_name}," if order.customer_name else "Hello,"
        lines = [greeting, "", f"Order {order.id} is now {order.status.lower()}."]
        if kind == NotificationKind.PLACED:
            lines.append(f"Total: {order.total_price}")
            if order.delivery_date:
                lines.append(f"Delivery date: {order.delivery_date.isoformat()}")
        return "\n".join(lines)
