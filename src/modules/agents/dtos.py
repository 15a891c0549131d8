"""Agent request/response DTOs (pydantic v2, immutable)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.managers.models import Agent


class UpdateAgentDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    phone_number: str
    street_address: str
    city: str

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v):
        return v.strip() if isinstance(v, str) else v


class CreateAgentDTO(UpdateAgentDTO):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class AgentOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    manager_id: UUID
    first_name: str
    last_name: str
    email: str
    phone_number: str
    street_address: str
    city: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, agent: Agent) -> AgentOutputDTO:
        return cls(
            id=agent.id,
            manager_id=agent.manager_id,
            first_name=agent.first_name,
            last_name=agent.last_name,
            email=agent.email,
            phone_number=agent.phone_number,
            street_address=agent.street_address,
            city=agent.city,
            created_at=agent.created_at,
            updated_at=agent.updated_at,
        )
