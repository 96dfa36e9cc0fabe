"""Publishers for proposal and gallery domain events.

Usage:
    >>> await publish_speaker_tagged(
    ...     event_bus,
    ...     image=image,
    ...     speakers=updated_speakers,
    ...     previous_speaker_ids=existing_ids,
    ... )
"""

from collections.abc import Iterable, Sequence

from src.domain.enums import ProposalAction, ProposalStatus
from src.domain.events import (
    GallerySpeakerTagged,
    ProposalEventMetadata,
    ProposalStatusChanged,
)
from src.domain.protocols import EventBusProtocol
from src.domain.value_objects import (
    ConferenceSnapshot,
    GalleryImageSnapshot,
    ProposalSnapshot,
    Speaker,
    TriggeredBy,
)


async def publish_proposal_status_changed(
    event_bus: EventBusProtocol,
    *,
    proposal: ProposalSnapshot,
    previous_status: ProposalStatus,
    new_status: ProposalStatus,
    action: ProposalAction,
    conference: ConferenceSnapshot,
    speakers: Sequence[Speaker],
    triggered_by: TriggeredBy,
    should_notify: bool = False,
    comment: str | None = None,
    domain: str | None = None,
) -> ProposalStatusChanged:
    """Publish ProposalStatusChanged after a proposal action was saved.

    Returns:
        The published event.
    """
    event = ProposalStatusChanged(
        proposal=proposal,
        previous_status=previous_status,
        new_status=new_status,
        action=action,
        conference=conference,
        speakers=tuple(speakers),
        metadata=ProposalEventMetadata(
            triggered_by=triggered_by,
            should_notify=should_notify,
            comment=comment,
            domain=domain,
        ),
    )
    await event_bus.publish(event)
    return event


async def publish_speaker_tagged(
    event_bus: EventBusProtocol,
    *,
    image: GalleryImageSnapshot,
    speakers: Sequence[Speaker],
    previous_speaker_ids: Iterable[str] = (),
) -> GallerySpeakerTagged | None:
    """Publish GallerySpeakerTagged for speakers not tagged before.

    Args:
        event_bus: Bus to publish on.
        image: Image after the update.
        speakers: All speakers now tagged in the image.
        previous_speaker_ids: Speaker IDs tagged before the update.

    Returns:
        The published event, or None when no speaker is new.
    """
    already_tagged = set(previous_speaker_ids)
    new_speakers = tuple(s for s in speakers if s.id not in already_tagged)
    if not new_speakers:
        return None

    event = GallerySpeakerTagged(image=image, speakers=new_speakers)
    await event_bus.publish(event)
    return event
