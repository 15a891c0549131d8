"""Django ORM implementations of the manager and agent repositories."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.managers.models import Agent, Manager
from modules.managers.repositories.interfaces import IAgentRepository, IManagerRepository

logger = structlog.get_logger(__name__)


class ManagerDjangoRepository(IManagerRepository):
    def get_by_id(self, id: str) -> Optional[Manager]:
        try:
            return Manager.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_email(self, email: str) -> Optional[Manager]:
        return Manager.objects.filter(email__iexact=email).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Manager]:
        queryset = Manager.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Manager) -> Manager:
        is_new = entity._state.adding
        entity.save()
        logger.info("manager.saved", manager_id=str(entity.id), is_new=is_new)
        return entity


class AgentDjangoRepository(IAgentRepository):
    def list_for_manager(self, manager_id: UUID) -> List[Agent]:
        return list(Agent.objects.filter(manager_id=manager_id))

    def get_for_manager(self, manager_id: UUID, agent_id: UUID) -> Optional[Agent]:
        try:
            return Agent.objects.filter(manager_id=manager_id, id=agent_id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_id(self, agent_id: UUID | str) -> Optional[Agent]:
        try:
            return Agent.objects.filter(id=agent_id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_email(self, email: str) -> Optional[Agent]:
        return Agent.objects.filter(email__iexact=email).first()

    def count_for_manager(self, manager_id: UUID) -> int:
        return Agent.objects.filter(manager_id=manager_id).count()

    @transaction.atomic
    def save(self, entity: Agent) -> Agent:
        is_new = entity._state.adding
        entity.save()
        logger.info("agent.saved", agent_id=str(entity.id), is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, entity: Agent) -> None:
        user = entity.user
        agent_id = str(entity.id)
        # customer and order FKs are SET_NULL
        entity.delete()
        if user is not None:
            user.delete()
        logger.info("agent.deleted", agent_id=agent_id)
