"""Domain events for the order lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderLifecycleEvent(DomainEvent):
    manager_id: UUID
    agent_id: Optional[UUID] = None


@dataclass(frozen=True, kw_only=True)
class OrderPlaced(OrderLifecycleEvent):
    """Raised when the customer places a link."""


@dataclass(frozen=True, kw_only=True)
class OrderCompleted(OrderLifecycleEvent):
    """Raised when a placed order is marked done."""


@dataclass(frozen=True, kw_only=True)
class OrderCancelled(OrderLifecycleEvent):
    """Raised when a placed order is cancelled."""
