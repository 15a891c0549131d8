"""Order and OrderItem models.

- An order starts as an empty ``CREATED`` link owned by a manager (and the
  agent who created it, if any); the customer fills it in when placing it.
- Customer fields on the order are a snapshot taken when the order is
  placed; ``customer`` optionally points at the customer record it was
  created for.
- ``status`` only changes through ``OrderStateMachine``.
- Orders are never deleted; expiry is a status change.
- ``OrderItem`` snapshots the product name and unit price; ``subtotal`` is
  always ``quantity * unit_price`` (calculated on save).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import OrderStatus
from shared.domain.events import DomainEventMixin


class Order(DomainEventMixin, BaseModel):
    """Order aggregate root."""

    manager = models.ForeignKey(
        "managers.Manager",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    agent = models.ForeignKey(
        "managers.Agent",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )
    customer_name = models.CharField(max_length=255, blank=True, default="")
    customer_phone = models.CharField(max_length=20, blank=True, default="")
    customer_email = models.CharField(max_length=254, blank=True, default="")
    customer_street_address = models.CharField(max_length=255, blank=True, default="")
    customer_city = models.CharField(max_length=100, blank=True, default="")
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.CREATED,
    )
    total_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    delivery_date = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True, default="")
    placed_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="orders_status_created_idx"),
            models.Index(fields=["manager", "-created_at"], name="orders_manager_created_idx"),
            models.Index(fields=["manager", "completed_at"], name="orders_manager_done_idx"),
        ]

    @property
    def is_link(self) -> bool:
        return self.status == OrderStatus.CREATED

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status})"


class OrderItem(BaseModel):
    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    product_id = models.CharField(max_length=64)
    product_name = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    subtotal = models.DecimalField(max_digits=12, decimal_places=2, editable=False)

    class Meta:
        db_table = "order_items"
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_items_quantity_positive",
            ),
        ]

    def save(self, *args: Any, **kwargs: Any) -> None:
        self.subtotal = self.quantity * self.unit_price
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.product_name} x{self.quantity} ({self.subtotal})"
