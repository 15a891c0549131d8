"""Order DTOs for the service layer.

Immutable pydantic v2 contracts between the DRF views and ``OrderService``.

- ``CreateOrderLinkDTO``: input for creating an empty order (a link).
- ``PlaceOrderDTO``: what the customer submits to place a link.
- ``OrderOutputDTO``: API representation with line items.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

if TYPE_CHECKING:
    from modules.orders.models import Order, OrderItem


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderLinkDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_id: Optional[UUID] = None
    notes: str = ""


class PlaceOrderItemDTO(BaseModel):
    """A line item as submitted by the customer, with the price it was shown."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    product_name: str
    quantity: int = Field(ge=1)
    unit_price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


class PlaceOrderDTO(BaseModel):
    """Customer details and line items submitted when placing a link.

    An empty ``items`` list is accepted here; the state machine rejects it
    with the proper failure.
    """

    model_config = ConfigDict(frozen=True)

    customer_name: str
    customer_phone: str
    customer_email: str
    customer_street_address: str
    customer_city: str
    items: List[PlaceOrderItemDTO] = []
    delivery_date: Optional[date] = None
    notes: str = ""

    @field_validator(
        "customer_name",
        "customer_phone",
        "customer_email",
        "customer_street_address",
        "customer_city",
        "notes",
        mode="before",
    )
    @classmethod
    def strip_strings(cls, v):
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def no_duplicate_products(self):
        product_ids = [item.product_id for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValueError("Duplicate product IDs are not allowed in the same order.")
        return self

    @property
    def total_price(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0.00"))


class NotifyOrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderItemOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> OrderItemOutputDTO:
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            unit_price=item.unit_price,
            subtotal=item.subtotal,
        )


class OrderOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    manager_id: UUID
    agent_id: Optional[UUID]
    customer_id: Optional[UUID]
    customer_name: str
    customer_phone: str
    customer_email: str
    customer_street_address: str
    customer_city: str
    status: str
    total_price: Decimal
    delivery_date: Optional[date]
    notes: str
    created_at: datetime
    updated_at: datetime
    placed_at: Optional[datetime]
    completed_at: Optional[datetime]
    items: List[OrderItemOutputDTO]

    @classmethod
    def from_entity(cls, order: Order) -> OrderOutputDTO:
        """Build the DTO; ``items`` should be prefetched."""
        return cls(
            id=order.id,
            manager_id=order.manager_id,
            agent_id=order.agent_id,
            customer_id=order.customer_id,
            customer_name=order.customer_name,
            customer_phone=order.customer_phone,
            customer_email=order.customer_email,
            customer_street_address=order.customer_street_address,
            customer_city=order.customer_city,
            status=order.status,
            total_price=order.total_price,
            delivery_date=order.delivery_date,
            notes=order.notes,
            created_at=order.created_at,
            updated_at=order.updated_at,
            placed_at=order.placed_at,
            completed_at=order.completed_at,
            items=[OrderItemOutputDTO.from_entity(item) for item in order.items.all()],
        )
