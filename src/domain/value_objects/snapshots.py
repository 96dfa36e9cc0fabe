"""Immutable snapshots of documents referenced by domain events.

Reference:
    - src/domain/events/proposal_events.py
    - src/domain/events/gallery_events.py
"""

from dataclasses import dataclass

from src.domain.enums import ProposalStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class ConferenceSnapshot:
    """Conference the event happened in.

    Attributes:
        id: Conference document ID.
        title: Conference title (e.g., "Cloud Native Days Norway 2026").
        domains: Public domains serving this conference; the first is canonical.
        cfp_email: Reply-to address for CFP emails.
        cfp_notification_channel: Chat channel for CFP notifications.
    """

    id: str
    title: str
    domains: tuple[str, ...] = ()
    cfp_email: str | None = None
    cfp_notification_channel: str | None = None

    @property
    def primary_domain(self) -> str | None:
        return self.domains[0] if self.domains else None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProposalSnapshot:
    """Proposal state right after the status change.

    Attributes:
        id: Proposal document ID.
        title: Talk title.
        status: Status after the change.
        format: Talk format (e.g., "presentation_25"), informational only.
    """

    id: str
    title: str
    status: ProposalStatus
    format: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GalleryImageSnapshot:
    """Gallery image a speaker was tagged in.

    Attributes:
        id: Image document ID.
        image_url: Resolved CDN URL of the image.
        conference_title: Title of the conference the photo belongs to.
        photographer: Photographer credit.
        location: Where the photo was taken.
        date: ISO date the photo was taken.
    """

    id: str
    image_url: str
    conference_title: str
    photographer: str | None = None
    location: str | None = None
    date: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TriggeredBy:
    """Actor who caused a proposal status change.

    Attributes:
        speaker_id: Speaker document ID of the actor.
        is_organizer: True when an organizer acted (accept/reject/remind).
    """

    speaker_id: str
    is_organizer: bool = False
