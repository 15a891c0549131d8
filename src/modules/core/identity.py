"""Caller identity resolved from the authenticated Django user.

Authentication itself is SimpleJWT's job.  This module only maps the user to
the tenant it acts for: a manager acts for itself, an agent acts for its
manager.  The lifecycle core trusts the identity it is handed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from rest_framework.exceptions import PermissionDenied
from rest_framework.request import Request


@dataclass(frozen=True)
class CallerIdentity:
    manager_id: UUID
    agent_id: Optional[UUID] = None

    @property
    def is_agent(self) -> bool:
        return self.agent_id is not None


def resolve_identity(request: Request) -> CallerIdentity:
    user = request.user
    manager = getattr(user, "manager_profile", None)
    if manager is not None:
        return CallerIdentity(manager_id=manager.id)

    agent = getattr(user, "agent_profile", None)
    if agent is not None:
        return CallerIdentity(manager_id=agent.manager_id, agent_id=agent.id)

    raise PermissionDenied("Only managers and agents can perform this action.")
