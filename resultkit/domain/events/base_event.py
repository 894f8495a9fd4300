"""Base domain event class.

Domain events represent "things that happened" and are immutable records of
facts. The event observer emits ResultEvent, a subclass of DomainEvent.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided. Used for tracking and deduplication
            by subscribers.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
