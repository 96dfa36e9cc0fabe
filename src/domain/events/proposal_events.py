"""Proposal domain events.

Published after a proposal action (accept, reject, confirm, withdraw, ...)
has been persisted. Consumers: proposal email, chat notification and
speaker audience sync handlers.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.enums import ProposalAction, ProposalStatus
from src.domain.events.base_event import DomainEvent, EventType
from src.domain.value_objects import (
    ConferenceSnapshot,
    ProposalSnapshot,
    Speaker,
    TriggeredBy,
)


@dataclass(frozen=True, kw_only=True, slots=True)
class ProposalEventMetadata:
    """Context attached to a proposal status change.

    Attributes:
        triggered_by: Actor who performed the action.
        should_notify: Organizer's choice to email the speaker.
        comment: Optional organizer comment included in emails.
        domain: Conference domain the action was taken on, used for links.
    """

    triggered_by: TriggeredBy
    should_notify: bool = False
    comment: str | None = None
    domain: str | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class ProposalStatusChanged(DomainEvent):
    """A proposal moved from one status to another.

    Attributes:
        proposal: Proposal snapshot after the change.
        previous_status: Status before the action.
        new_status: Status after the action.
        action: Action that caused the change.
        conference: Conference the proposal belongs to.
        speakers: All speakers on the proposal; the first is primary.
        metadata: Actor, notification flag and comment.
    """

    event_type: ClassVar[EventType] = EventType.PROPOSAL_STATUS_CHANGED

    proposal: ProposalSnapshot
    previous_status: ProposalStatus
    new_status: ProposalStatus
    action: ProposalAction
    conference: ConferenceSnapshot
    speakers: tuple[Speaker, ...]
    metadata: ProposalEventMetadata

    @property
    def primary_speaker(self) -> Speaker | None:
        return self.speakers[0] if self.speakers else None
