"""Messaging events - Event, EventMetadata."""

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time (timezone aware)."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for an event."""

    source: str
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class Event:
    """Immutable message published on the bus: a topic name and a payload."""

    name: str
    payload: Mapping[str, object]
    metadata: EventMetadata = field(default_factory=lambda: EventMetadata(source="unknown"))

    def __post_init__(self) -> None:
        # Detach from the caller's dict so later mutation cannot leak in.
        object.__setattr__(self, "payload", dict(self.payload))

    @classmethod
    def create(cls, name: str, payload: Mapping[str, object], source: str) -> "Event":
        """Build an event with fresh metadata."""
        return cls(name=name, payload=payload, metadata=EventMetadata(source=source))

    def with_payload(self, **extra: object) -> "Event":
        """Return a copy whose payload is extended with `extra`."""
        return Event(name=self.name, payload={**self.payload, **extra}, metadata=self.metadata)
