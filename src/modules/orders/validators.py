from __future__ import annotations

from datetime import date
from typing import Optional

from modules.orders.dtos import PlaceOrderDTO
from shared.domain import field_validators as fv


class OrderValidators:
    @staticmethod
    def validate_place_order(dto: PlaceOrderDTO, today: Optional[date] = None) -> None:
        """Customer details first, then delivery date, then line item prices."""
        fv.validate_non_empty(dto.customer_name, "'customer name'")
        fv.validate_phone_number(dto.customer_phone)
        fv.validate_email(dto.customer_email)
        fv.validate_non_empty(dto.customer_street_address, "'street address'")
        fv.validate_non_empty(dto.customer_city, "'city'")
        if dto.delivery_date is not None:
            fv.validate_not_past_date(dto.delivery_date, "Delivery date", today=today)
        for item in dto.items:
            fv.validate_non_empty(item.product_name, "'product name'")
            fv.validate_price(item.unit_price)
