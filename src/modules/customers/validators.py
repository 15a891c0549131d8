from __future__ import annotations

from modules.customers.dtos import CustomerPayloadDTO
from shared.domain import field_validators as fv

STATE_ID_LENGTH = 9


class CustomerValidators:
    @staticmethod
    def validate_payload(payload: CustomerPayloadDTO) -> None:
        fv.validate_non_empty(payload.name, "'name'")
        fv.validate_phone_number(payload.phone_number)
        fv.validate_email(payload.email)
        fv.validate_non_empty(payload.street_address, "'street address'")
        fv.validate_non_empty(payload.city, "'city'")
        fv.validate_numeric_string(payload.state_id, STATE_ID_LENGTH, "Customer state ID")
