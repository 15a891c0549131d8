"""Per-manager agent cap.

Same contract as the customer cap: the caller reads the count, no lock is
held, and the cap is a soft bound.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from django.conf import settings

from modules.agents.exceptions import AgentFailureReason

MAX_AGENTS_PER_MANAGER = 10


def max_agents_per_manager() -> int:
    return getattr(settings, "MAX_AGENTS_PER_MANAGER", MAX_AGENTS_PER_MANAGER)


def validate_max_agents(
    current_count: int, manager_id: UUID | str, limit: Optional[int] = None
) -> None:
    limit = max_agents_per_manager() if limit is None else limit
    if current_count >= limit:
        raise AgentFailureReason.LIMIT_REACHED.exception(manager_id=manager_id, limit=limit)
