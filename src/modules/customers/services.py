"""Customer service layer (use cases).

Orchestrates the Customer aggregate for a caller scope: a manager sees its
whole book and creates customers of its own; an agent sees and creates only
its customers.  Persistence goes through the injected repositories.

Rules enforced here, in order:
- payload field rules (``CustomerValidators``)
- an agent scope must name an agent of the manager
- phone numbers are unique within a manager's book
- the per-owner customer cap (create only)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

import structlog
from django.db import transaction

from modules.customers.capacity import validate_customers_cap
from modules.customers.exceptions import CustomerFailureReason
from modules.customers.models import Customer
from modules.customers.validators import CustomerValidators

if TYPE_CHECKING:
    from modules.customers.dtos import CustomerPayloadDTO
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.managers.repositories.interfaces import IAgentRepository

logger = structlog.get_logger(__name__)

_PAYLOAD_FIELDS = ("name", "phone_number", "email", "street_address", "city", "state_id")


class CustomerService:
    """Application service for Customer use cases."""

    def __init__(
        self, repository: ICustomerRepository, agent_repository: IAgentRepository
    ) -> None:
        self._repo = repository
        self._agents = agent_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(
        self, manager_id: UUID, agent_id: Optional[UUID], payload: CustomerPayloadDTO
    ) -> Customer:
        """Create a customer for the caller scope.

        Raises:
            ServiceException: ``VALIDATION_ERROR`` for payload or duplicate
                phone, ``NOT_FOUND`` for a foreign agent,
                ``CAPACITY_EXCEEDED`` when the owner is at the cap.
        """
        CustomerValidators.validate_payload(payload)
        if agent_id is not None:
            self._ensure_agent(manager_id, agent_id)
        self._ensure_unique_phone(manager_id, payload.phone_number, exclude_id=None)

        current = self._repo.count_for(manager_id, agent_id)
        validate_customers_cap(current, manager_id, agent_id)

        customer = Customer(
            manager_id=manager_id,
            agent_id=agent_id,
            **{field: getattr(payload, field) for field in _PAYLOAD_FIELDS},
        )
        customer = self._repo.save(customer)
        logger.info(
            "customer.created",
            customer_id=str(customer.id),
            manager_id=str(manager_id),
            agent_id=str(agent_id) if agent_id else None,
        )
        return customer

    @transaction.atomic
    def update_customer(
        self,
        manager_id: UUID,
        agent_id: Optional[UUID],
        customer_id: str,
        payload: CustomerPayloadDTO,
    ) -> Customer:
        CustomerValidators.validate_payload(payload)
        customer = self.get_customer(manager_id, agent_id, customer_id)
        self._ensure_unique_phone(manager_id, payload.phone_number, exclude_id=customer.id)

        for field in _PAYLOAD_FIELDS:
            setattr(customer, field, getattr(payload, field))
        customer = self._repo.save(customer)
        logger.info("customer.updated", customer_id=str(customer.id))
        return customer

    @transaction.atomic
    def delete_customer(self, manager_id: UUID, agent_id: Optional[UUID], customer_id: str) -> None:
        customer = self.get_customer(manager_id, agent_id, customer_id)
        self._repo.delete(customer)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self, manager_id: UUID, agent_id: Optional[UUID] = None) -> List[Customer]:
        if agent_id is not None:
            self._ensure_agent(manager_id, agent_id)
        return self._repo.list_for_owner(manager_id, agent_id)

    def get_customer(
        self, manager_id: UUID, agent_id: Optional[UUID], customer_id: str
    ) -> Customer:
        if agent_id is not None:
            self._ensure_agent(manager_id, agent_id)
        customer = self._repo.get_for_owner(manager_id, customer_id, agent_id)
        if not customer:
            raise CustomerFailureReason.CUSTOMER_NOT_FOUND.exception(
                customer_id=customer_id, manager_id=manager_id, agent_id=agent_id
            )
        return customer

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def _ensure_agent(self, manager_id: UUID, agent_id: UUID) -> None:
        if not self._agents.get_for_manager(manager_id, agent_id):
            raise CustomerFailureReason.AGENT_NOT_FOUND.exception(
                manager_id=manager_id, agent_id=agent_id
            )

    def _ensure_unique_phone(
        self, manager_id: UUID, phone_number: str, exclude_id: Optional[UUID]
    ) -> None:
        existing = self._repo.get_by_phone_number(manager_id, phone_number)
        if existing and existing.id != exclude_id:
            logger.warning("customer.duplicate_phone_number", manager_id=str(manager_id))
            raise CustomerFailureReason.CUSTOMER_ALREADY_EXISTS.exception(
                phone_number=phone_number, manager_id=manager_id
            )
