"""Field rules for agent requests (ordered, fail-fast)."""

from __future__ import annotations

from modules.agents.dtos import CreateAgentDTO, UpdateAgentDTO
from shared.domain import field_validators as fv


class AgentValidators:
    @staticmethod
    def validate_create_agent_fields(dto: CreateAgentDTO) -> None:
        fv.validate_non_empty(dto.first_name, "'first name'")
        fv.validate_non_empty(dto.last_name, "'last name'")
        fv.validate_email(dto.email)
        fv.validate_strong_password(dto.password)
        fv.validate_phone_number(dto.phone_number)
        fv.validate_non_empty(dto.street_address, "'street address'")
        fv.validate_non_empty(dto.city, "'city'")

    @staticmethod
    def validate_update_agent_fields(dto: UpdateAgentDTO) -> None:
        fv.validate_non_empty(dto.first_name, "'first name'")
        fv.validate_non_empty(dto.last_name, "'last name'")
        fv.validate_phone_number(dto.phone_number)
        fv.validate_non_empty(dto.street_address, "'street address'")
        fv.validate_non_empty(dto.city, "'city'")
