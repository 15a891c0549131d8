"""Business DTOs (pydantic v2, immutable)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.businesses.models import Business


class UpdateBusinessDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    state_id_number: str
    email: str
    phone_number: str
    street_address: str
    city: str

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v):
        return v.strip() if isinstance(v, str) else v


class CreateBusinessDTO(UpdateBusinessDTO):
    manager_id: str


class BusinessOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    manager_id: UUID
    name: str
    state_id_number: str
    email: str
    phone_number: str
    street_address: str
    city: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, business: Business) -> BusinessOutputDTO:
        return cls(
            id=business.id,
            manager_id=business.manager_id,
            name=business.name,
            state_id_number=business.state_id_number,
            email=business.email,
            phone_number=business.phone_number,
            street_address=business.street_address,
            city=business.city,
            created_at=business.created_at,
            updated_at=business.updated_at,
        )
