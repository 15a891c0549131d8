"""Base repository contract.

Services depend on these abstractions; the Django ORM implementations live
next to each module's models.  Look-ups return ``None`` for missing rows and
leave the decision to raise ``NOT_FOUND`` to the service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by primary key, ``None`` if absent or malformed."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[T]:
        """List entities matching Django-style look-ups."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (insert or update) an entity."""
