"""Gallery domain events."""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.events.base_event import DomainEvent, EventType
from src.domain.value_objects import GalleryImageSnapshot, Speaker


@dataclass(frozen=True, kw_only=True, slots=True)
class GallerySpeakerTagged(DomainEvent):
    """Speakers were newly tagged in a gallery image.

    Only speakers added by this change are listed; speakers already tagged
    before an update are not notified again.

    Attributes:
        image: Image the speakers were tagged in.
        speakers: Newly tagged speakers.
    """

    event_type: ClassVar[EventType] = EventType.GALLERY_SPEAKER_TAGGED

    image: GalleryImageSnapshot
    speakers: tuple[Speaker, ...]
