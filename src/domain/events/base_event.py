"""Base domain event class and the closed set of event types.

Domain events represent "things that happened" and are named in past tense
(ProposalStatusChanged, GallerySpeakerTagged). Each event carries a full
snapshot of what its handlers need, so no handler performs a secondary lookup.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) and occurred_at (UTC)
    - Class-level event_type discriminant drawn from the closed EventType enum;
      the event bus routes on it

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class SomethingHappened(DomainEvent):
    ...     event_type: ClassVar[EventType] = EventType.SOMETHING_HAPPENED
    ...     thing_id: str
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import ClassVar
from uuid import UUID, uuid4


class EventType(str, Enum):
    """Closed enumeration of event topics.

    Values are the wire names used in logs.
    """

    PROPOSAL_STATUS_CHANGED = "proposal.status.changed"
    GALLERY_SPEAKER_TAGGED = "gallery.speaker.tagged"


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Declare a ``event_type`` ClassVar from EventType
        3. Be frozen, keyword-only dataclasses
        4. Hold only immutable payload (tuples, frozen dataclasses)

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: When the event occurred (UTC).
    """

    event_type: ClassVar[EventType]

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
