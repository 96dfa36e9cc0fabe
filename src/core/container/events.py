"""Event bus composition.

The bus is built exactly once per process by the FastAPI lifespan
(``build_event_bus``) and stored on ``app.state.event_bus``; nothing here
runs at import time. Tests build a fresh bus per test.

Subscriptions:
    proposal.status.changed → ProposalEmailEventHandler
                            → ProposalChatEventHandler
                            → AudienceSyncEventHandler
    gallery.speaker.tagged  → GalleryTagEventHandler
"""

from typing import TYPE_CHECKING

from fastapi import Request

from src.core.config import Settings
from src.domain.events import EventType

if TYPE_CHECKING:
    from src.domain.protocols import (
        AudienceProtocol,
        ChatNotifierProtocol,
        EmailSenderProtocol,
        EventBusProtocol,
        LoggerProtocol,
    )
    from src.infrastructure.events import InMemoryEventBus
    from src.infrastructure.events.handlers import (
        AudienceSyncEventHandler,
        GalleryTagEventHandler,
        ProposalChatEventHandler,
        ProposalEmailEventHandler,
    )


def register_event_handlers(
    event_bus: "EventBusProtocol",
    *,
    email_handler: "ProposalEmailEventHandler",
    chat_handler: "ProposalChatEventHandler",
    audience_handler: "AudienceSyncEventHandler",
    gallery_handler: "GalleryTagEventHandler",
) -> None:
    """Subscribe every domain handler to its event type.

    Subscription has set semantics, so calling this twice on the same bus
    with the same handler instances leaves one subscription each.
    """
    event_bus.subscribe(
        EventType.PROPOSAL_STATUS_CHANGED, email_handler.handle_proposal_status_changed
    )
    event_bus.subscribe(
        EventType.PROPOSAL_STATUS_CHANGED, chat_handler.handle_proposal_status_changed
    )
    event_bus.subscribe(
        EventType.PROPOSAL_STATUS_CHANGED,
        audience_handler.handle_proposal_status_changed,
    )
    event_bus.subscribe(
        EventType.GALLERY_SPEAKER_TAGGED, gallery_handler.handle_gallery_speaker_tagged
    )


def build_event_bus(
    settings: Settings,
    logger: "LoggerProtocol",
    *,
    email_sender: "EmailSenderProtocol | None" = None,
    chat_notifier: "ChatNotifierProtocol | None" = None,
    audience: "AudienceProtocol | None" = None,
) -> "InMemoryEventBus":
    """Create a bus with all domain handlers registered.

    Ports default to the container singletons; tests pass mocks.

    Returns:
        InMemoryEventBus with handlers subscribed.
    """
    from src.core.container.infrastructure import (
        get_audience_client,
        get_chat_notifier,
        get_email_sender,
    )
    from src.infrastructure.events import InMemoryEventBus
    from src.infrastructure.events.handlers import (
        AudienceSyncEventHandler,
        GalleryTagEventHandler,
        ProposalChatEventHandler,
        ProposalEmailEventHandler,
    )

    email_sender = email_sender or get_email_sender()
    chat_notifier = chat_notifier or get_chat_notifier()
    audience = audience or get_audience_client()

    event_bus = InMemoryEventBus(logger=logger)
    register_event_handlers(
        event_bus,
        email_handler=ProposalEmailEventHandler(
            email_sender=email_sender, logger=logger, settings=settings
        ),
        chat_handler=ProposalChatEventHandler(
            chat_notifier=chat_notifier, logger=logger, settings=settings
        ),
        audience_handler=AudienceSyncEventHandler(audience=audience, logger=logger),
        gallery_handler=GalleryTagEventHandler(
            email_sender=email_sender, logger=logger, settings=settings
        ),
    )

    logger.info(
        "event_bus_configured",
        proposal_handlers=event_bus.handler_count(EventType.PROPOSAL_STATUS_CHANGED),
        gallery_handlers=event_bus.handler_count(EventType.GALLERY_SPEAKER_TAGGED),
    )
    return event_bus


def get_event_bus(request: Request) -> "EventBusProtocol":
    """FastAPI dependency returning the bus built at startup.

    Usage:
        event_bus: EventBusProtocol = Depends(get_event_bus)
    """
    return request.app.state.event_bus
