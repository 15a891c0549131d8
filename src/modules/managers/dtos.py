"""Manager request/response DTOs (pydantic v2, immutable)."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.managers.models import Manager


class _StrippedModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v):
        return v.strip() if isinstance(v, str) else v


class CreateManagerDTO(_StrippedModel):
    first_name: str
    last_name: str
    email: str
    password: str
    phone_number: str
    date_of_birth: date
    street_address: str
    city: str

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class UpdateManagerDTO(_StrippedModel):
    first_name: str
    last_name: str
    phone_number: str
    date_of_birth: date
    street_address: str
    city: str


class ChangePasswordDTO(BaseModel):
    """Shared by managers and agents; values are not stripped."""

    model_config = ConfigDict(frozen=True)

    old_password: str
    new_password: str
    new_password_confirmation: str


class ManagerOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    first_name: str
    last_name: str
    email: str
    phone_number: str
    date_of_birth: date
    street_address: str
    city: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, manager: Manager) -> ManagerOutputDTO:
        return cls(
            id=manager.id,
            first_name=manager.first_name,
            last_name=manager.last_name,
            email=manager.email,
            phone_number=manager.phone_number,
            date_of_birth=manager.date_of_birth,
            street_address=manager.street_address,
            city=manager.city,
            created_at=manager.created_at,
            updated_at=manager.updated_at,
        )
