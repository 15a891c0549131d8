from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.orders"
    label = "orders"

    def ready(self) -> None:
        from modules.orders.events import OrderCancelled, OrderCompleted, OrderPlaced
        from modules.orders.handlers import (
            order_cancelled_handler,
            order_completed_handler,
            order_placed_handler,
        )
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(OrderPlaced, order_placed_handler)
        event_bus.subscribe(OrderCompleted, order_completed_handler)
        event_bus.subscribe(OrderCancelled, order_cancelled_handler)
