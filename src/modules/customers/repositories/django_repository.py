"""Django ORM implementation of the Customer repository.

Look-ups return ``None`` for non-existent or malformed IDs; the service
decides how to report a missing customer.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Customer]:
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Customer]:
        """List customers with optional Django ORM look-ups, e.g. ``{"city__iexact": "lisbon"}``."""
        queryset = Customer.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def list_for_owner(self, manager_id: UUID, agent_id: Optional[UUID] = None) -> List[Customer]:
        queryset = Customer.objects.filter(manager_id=manager_id)
        if agent_id is not None:
            queryset = queryset.filter(agent_id=agent_id)
        return list(queryset)

    def get_for_owner(
        self, manager_id: UUID, customer_id: str, agent_id: Optional[UUID] = None
    ) -> Optional[Customer]:
        queryset = Customer.objects.filter(manager_id=manager_id)
        if agent_id is not None:
            queryset = queryset.filter(agent_id=agent_id)
        try:
            return queryset.filter(id=customer_id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_phone_number(self, manager_id: UUID, phone_number: str) -> Optional[Customer]:
        return Customer.objects.filter(manager_id=manager_id, phone_number=phone_number).first()

    def count_for(self, manager_id: UUID, agent_id: Optional[UUID]) -> int:
        if agent_id is None:
            return Customer.objects.filter(manager_id=manager_id, agent__isnull=True).count()
        return Customer.objects.filter(manager_id=manager_id, agent_id=agent_id).count()

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        is_new = entity._state.adding
        entity.save()
        logger.info("customer.saved", customer_id=str(entity.id), is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, entity: Customer) -> None:
        customer_id = str(entity.id)
        entity.delete()
        logger.info("customer.deleted", customer_id=customer_id)
