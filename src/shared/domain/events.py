"""Domain event primitives for order lifecycle notifications."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Immutable record of something that happened to an aggregate."""

    aggregate_id: UUID
    event_id: UUID = field(default_factory=uuid4)
    occurred_on: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def event_name(self) -> str:
        return type(self).__name__

    def as_log_context(self) -> dict[str, Any]:
        """Flatten the event into structlog-friendly key/values."""
        context = {key: str(value) for key, value in asdict(self).items()}
        context["event_name"] = self.event_name
        return context


class DomainEventMixin:
    """Collects events on an aggregate until the repository flushes them."""

    _pending_events: list[DomainEvent]

    def record_event(self, event: DomainEvent) -> None:
        self.__dict__.setdefault("_pending_events", []).append(event)

    def pull_events(self) -> list[DomainEvent]:
        """Return and forget the recorded events."""
        events = self.__dict__.pop("_pending_events", [])
        return list(events)

    @property
    def pending_events(self) -> list[DomainEvent]:
        return list(self.__dict__.get("_pending_events", []))
