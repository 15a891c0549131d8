"""Field rules for manager requests.

Checks run in declaration order and stop at the first failure.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from modules.managers.dtos import CreateManagerDTO, UpdateManagerDTO
from shared.domain import field_validators as fv


class ManagerValidators:
    @staticmethod
    def validate_create_manager_fields(
        dto: CreateManagerDTO, today: Optional[date] = None
    ) -> None:
        fv.validate_non_empty(dto.first_name, "'first name'")
        fv.validate_non_empty(dto.last_name, "'last name'")
        fv.validate_email(dto.email)
        fv.validate_strong_password(dto.password)
        fv.validate_phone_number(dto.phone_number)
        fv.validate_date_not_future(dto.date_of_birth, "'date of birth'", today=today)
        fv.validate_non_empty(dto.street_address, "'street address'")
        fv.validate_non_empty(dto.city, "'city'")

    @staticmethod
    def validate_update_manager_fields(
        dto: UpdateManagerDTO, today: Optional[date] = None
    ) -> None:
        fv.validate_non_empty(dto.first_name, "'first name'")
        fv.validate_non_empty(dto.last_name, "'last name'")
        fv.validate_phone_number(dto.phone_number)
        fv.validate_date_not_future(dto.date_of_birth, "'date of birth'", today=today)
        fv.validate_non_empty(dto.street_address, "'street address'")
        fv.validate_non_empty(dto.city, "'city'")
