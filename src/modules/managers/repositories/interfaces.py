from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.managers.models import Agent, Manager


class IManagerRepository(IRepository["Manager"]):
    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Manager]:
        """Retrieve a manager by (case-insensitive) email."""


class IAgentRepository(ABC):
    @abstractmethod
    def list_for_manager(self, manager_id: UUID) -> List[Agent]:
        """All agents working for a manager, ordered by name."""

    @abstractmethod
    def get_for_manager(self, manager_id: UUID, agent_id: UUID) -> Optional[Agent]:
        """An agent, only if it belongs to the given manager."""

    @abstractmethod
    def get_by_id(self, agent_id: UUID | str) -> Optional[Agent]:
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Agent]:
        """Retrieve an agent by (case-insensitive) email."""

    @abstractmethod
    def count_for_manager(self, manager_id: UUID) -> int:
        pass

    @abstractmethod
    def save(self, entity: Agent) -> Agent:
        pass

    @abstractmethod
    def delete(self, entity: Agent) -> None:
        """Delete the agent and its login user.

        Customers and orders it created stay with the manager, unassigned.
        """
