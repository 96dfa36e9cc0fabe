"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: Process-local event bus with fail-open behavior

Event Handlers (src.infrastructure.events.handlers):
    - ProposalEmailEventHandler, ProposalChatEventHandler,
      AudienceSyncEventHandler, GalleryTagEventHandler

Usage:
    >>> from src.infrastructure.events import InMemoryEventBus
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>> event_bus.subscribe(EventType.GALLERY_SPEAKER_TAGGED, handler.handle_gallery_speaker_tagged)
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
