from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.businesses.models import Business


class IBusinessRepository(IRepository["Business"]):
    @abstractmethod
    def get_by_manager(self, manager_id: str) -> Optional[Business]:
        """The business owned by a manager, if any."""
