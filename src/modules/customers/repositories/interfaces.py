"""Customer repository interface.

Extends ``IRepository[Customer]`` with the owner-scoped look-ups used by the
phone-number uniqueness rule and the customer cap.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def list_for_owner(self, manager_id: UUID, agent_id: Optional[UUID] = None) -> List[Customer]:
        """A manager's whole book, or only one agent's customers."""

    @abstractmethod
    def get_for_owner(
        self, manager_id: UUID, customer_id: str, agent_id: Optional[UUID] = None
    ) -> Optional[Customer]:
        """A customer, only if it belongs to the given manager (and agent)."""

    @abstractmethod
    def get_by_phone_number(self, manager_id: UUID, phone_number: str) -> Optional[Customer]:
        """The customer of a manager holding a phone number."""

    @abstractmethod
    def count_for(self, manager_id: UUID, agent_id: Optional[UUID]) -> int:
        """Live customer count for an owner.

        ``agent_id=None`` counts the manager's own customers (no agent).
        """

    @abstractmethod
    def delete(self, entity: Customer) -> None:
        """Remove a customer."""
