"""Domain events module.

Usage:
    >>> from src.domain.events import ProposalStatusChanged, EventType
    >>> await event_bus.publish(ProposalStatusChanged(...))
"""

from src.domain.events.base_event import DomainEvent, EventType
from src.domain.events.gallery_events import GallerySpeakerTagged
from src.domain.events.proposal_events import (
    ProposalEventMetadata,
    ProposalStatusChanged,
)

type AnyDomainEvent = ProposalStatusChanged | GallerySpeakerTagged
"""Closed union of every publishable event (match on it for exhaustiveness)."""

__all__ = [
    "AnyDomainEvent",
    "DomainEvent",
    "EventType",
    "GallerySpeakerTagged",
    "ProposalEventMetadata",
    "ProposalStatusChanged",
]
