"""Manager and agent repositories."""

from modules.managers.repositories.django_repository import (
    AgentDjangoRepository,
    ManagerDjangoRepository,
)
from modules.managers.repositories.interfaces import IAgentRepository, IManagerRepository

__all__ = [
    "AgentDjangoRepository",
    "IAgentRepository",
    "IManagerRepository",
    "ManagerDjangoRepository",
]
