"""Field rules for business requests (ordered, fail-fast)."""

from __future__ import annotations

from modules.businesses.dtos import CreateBusinessDTO, UpdateBusinessDTO
from shared.domain import field_validators as fv


class BusinessValidators:
    @staticmethod
    def validate_create_business_fields(dto: CreateBusinessDTO) -> None:
        fv.validate_non_empty(dto.manager_id, "'manager id'")
        fv.validate_non_empty(dto.name, "'name'")
        fv.validate_non_empty(dto.state_id_number, "'state id number'")
        fv.validate_email(dto.email)
        fv.validate_phone_number(dto.phone_number)
        fv.validate_non_empty(dto.street_address, "'street address'")
        fv.validate_non_empty(dto.city, "'city'")

    @staticmethod
    def validate_update_business_fields(dto: UpdateBusinessDTO) -> None:
        fv.validate_non_empty(dto.name, "'name'")
        fv.validate_non_empty(dto.state_id_number, "'state id number'")
        fv.validate_email(dto.email)
        fv.validate_phone_number(dto.phone_number)
        fv.validate_non_empty(dto.street_address, "'street address'")
        fv.validate_non_empty(dto.city, "'city'")
