"""Agent use cases.

A manager creates, edits and removes its agents; an agent reads and edits
its own profile and changes its password.

Create rules, in order:
- field rules (``AgentValidators``), password strength included
- the per-manager agent cap
- login email not taken by another agent or user
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List
from uuid import UUID

import structlog
from django.contrib.auth import get_user_model
from django.db import transaction

from modules.agents.capacity import validate_max_agents
from modules.agents.exceptions import AgentFailureReason
from modules.agents.validators import AgentValidators
from modules.managers.models import Agent
from shared.domain import field_validators as fv

if TYPE_CHECKING:
    from modules.agents.dtos import CreateAgentDTO, UpdateAgentDTO
    from modules.managers.dtos import ChangePasswordDTO
    from modules.managers.repositories.interfaces import IAgentRepository

logger = structlog.get_logger(__name__)

_PROFILE_FIELDS = ("first_name", "last_name", "phone_number", "street_address", "city")


class AgentService:
    def __init__(self, repository: IAgentRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Manager-side commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_agent(self, manager_id: UUID, dto: CreateAgentDTO) -> Agent:
        """Create an agent and its login user for ``manager_id``.

        Raises:
            ServiceException: ``VALIDATION_ERROR`` for field rules or a taken
                email, ``CAPACITY_EXCEEDED`` at the agent limit.
        """
        AgentValidators.validate_create_agent_fields(dto)
        validate_max_agents(self._repo.count_for_manager(manager_id), manager_id)

        if self._repo.get_by_email(dto.email) or self._login_taken(dto.email):
            logger.warning("agent.duplicate_email", manager_id=str(manager_id))
            raise AgentFailureReason.EMAIL_ALREADY_EXISTS.exception(email=dto.email)

        user = get_user_model().objects.create_user(
            username=dto.email,
            email=dto.email,
            password=dto.password,
            first_name=dto.first_name,
            last_name=dto.last_name,
        )
        agent = Agent(
            manager_id=manager_id,
            user=user,
            email=dto.email,
            **{field: getattr(dto, field) for field in _PROFILE_FIELDS},
        )
        agent = self._repo.save(agent)
        logger.info("agent.created", agent_id=str(agent.id), manager_id=str(manager_id))
        return agent

    @transaction.atomic
    def update_agent(self, manager_id: UUID, agent_id: str, dto: UpdateAgentDTO) -> Agent:
        agent = self.get_agent(manager_id, agent_id)
        AgentValidators.validate_update_agent_fields(dto)
        return self._apply_profile(agent, dto)

    @transaction.atomic
    def delete_agent(self, manager_id: UUID, agent_id: str) -> None:
        agent = self.get_agent(manager_id, agent_id)
        self._repo.delete(agent)
        logger.info("agent.removed", agent_id=str(agent_id), manager_id=str(manager_id))

    # ------------------------------------------------------------------
    # Agent-side commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def update_own_profile(self, agent_id: UUID, dto: UpdateAgentDTO) -> Agent:
        AgentValidators.validate_update_agent_fields(dto)
        return self._apply_profile(self.get_own_profile(agent_id), dto)

    @transaction.atomic
    def update_password(self, agent_id: UUID, dto: ChangePasswordDTO) -> None:
        fv.validate_password_change(
            dto.old_password, dto.new_password, dto.new_password_confirmation
        )
        agent = self.get_own_profile(agent_id)
        user = agent.user
        if user is None or not user.check_password(dto.old_password):
            logger.warning("agent.password_mismatch", agent_id=str(agent_id))
            raise AgentFailureReason.OLD_PASSWORD_INCORRECT.exception(agent_id=agent_id)

        user.set_password(dto.new_password)
        user.save(update_fields=["password"])
        self._repo.save(agent)
        logger.info("agent.password_updated", agent_id=str(agent_id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_agents(self, manager_id: UUID) -> List[Agent]:
        return self._repo.list_for_manager(manager_id)

    def get_agent(self, manager_id: UUID, agent_id: str) -> Agent:
        """An agent of ``manager_id``; agents of other managers are NOT_FOUND."""
        agent = self._repo.get_for_manager(manager_id, agent_id)
        if not agent:
            raise AgentFailureReason.NOT_FOUND.exception(
                agent_id=agent_id, manager_id=manager_id
            )
        return agent

    def get_own_profile(self, agent_id: UUID) -> Agent:
        agent = self._repo.get_by_id(agent_id)
        if not agent:
            raise AgentFailureReason.NOT_FOUND.exception(agent_id=agent_id, manager_id=None)
        return agent

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _apply_profile(self, agent: Agent, dto: UpdateAgentDTO) -> Agent:
        for field in _PROFILE_FIELDS:
            setattr(agent, field, getattr(dto, field))
        agent = self._repo.save(agent)
        logger.info("agent.updated", agent_id=str(agent.id))
        return agent

    @staticmethod
    def _login_taken(email: str) -> bool:
        return get_user_model().objects.filter(username__iexact=email).exists()
