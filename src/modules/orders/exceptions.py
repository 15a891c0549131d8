"""Order and order-notification failure reasons."""

from __future__ import annotations

from shared.domain.failures import ErrorKind, FailureReason


class OrderFailureReason(FailureReason):
    NOT_FOUND = (
        ErrorKind.NOT_FOUND,
        "Order not found",
        "Order `{order_id}` not found",
    )
    EXPIRED = (
        ErrorKind.ILLEGAL_STATE_TRANSITION,
        "This order link has expired",
        "Order link expired: order `{order_id}` cannot move EXPIRED -> {target}",
    )
    INVALID_STATUS = (
        ErrorKind.ILLEGAL_STATE_TRANSITION,
        "Cannot perform this action with current order status",
        "Invalid order status transition {current} -> {target} for order `{order_id}`",
    )
    NOT_PLACED = (
        ErrorKind.ILLEGAL_STATE_TRANSITION,
        "Order is not in PLACED status",
        "Order `{order_id}` has status {current}, expected PLACED before {target}",
    )
    NO_ITEMS = (
        ErrorKind.VALIDATION_ERROR,
        "Cannot place an order with no products",
        "Order `{order_id}` attempted to be placed with an empty products list",
    )
    NOT_EXPIRABLE = (
        ErrorKind.ILLEGAL_STATE_TRANSITION,
        "Order cannot be expired",
        "Order `{order_id}` not eligible for expiry: items={item_count}, created_at={created_at}",
    )


class NotificationFailureReason(FailureReason):
    ORDER_NOT_PLACED = (
        ErrorKind.VALIDATION_ERROR,
        "Notification can only be sent for orders in the matching status",
        "Order notification failed: order `{order_id}` is {current}, {kind} requires {required}",
    )
    ORDER_EMAIL_NOT_AVAILABLE = (
        ErrorKind.VALIDATION_ERROR,
        "Unable to send order notification",
        "Order notification failed: recipient email missing for order `{order_id}`",
    )
