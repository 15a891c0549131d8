"""Customer DTOs for the service layer.

Contracts between the API layer (DRF serializers) and ``CustomerService``.
Strings are trimmed on construction; content rules live in
``CustomerValidators`` so that failures carry the shared error taxonomy.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.customers.models import Customer


class CustomerPayloadDTO(BaseModel):
    """Create and update share one payload shape."""

    model_config = ConfigDict(frozen=True)

    name: str
    phone_number: str
    email: str
    street_address: str
    city: str
    state_id: str

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v):
        return v.strip() if isinstance(v, str) else v


class CustomerOutputDTO(BaseModel):
    """Customer API response; ``state_id`` is masked to its last 4 digits."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    manager_id: UUID
    agent_id: Optional[UUID]
    name: str
    phone_number: str
    email: str
    street_address: str
    city: str
    state_id: str
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def mask_state_id(raw: str) -> str:
        suffix = raw[-4:] if raw else "????"
        return f"***{suffix}"

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        return cls(
            id=customer.id,
            manager_id=customer.manager_id,
            agent_id=customer.agent_id,
            name=customer.name,
            phone_number=customer.phone_number,
            email=customer.email,
            street_address=customer.street_address,
            city=customer.city,
            state_id=cls.mask_state_id(customer.state_id),
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )
