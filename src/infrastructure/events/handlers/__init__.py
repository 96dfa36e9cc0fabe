"""Event handlers for infrastructure integration.

This module exports the event handlers that react to domain events and
perform outbound side effects (email, chat, mailing-list audiences).

Handlers:
    - ProposalEmailEventHandler: Emails speakers about organizer decisions
    - ProposalChatEventHandler: Posts confirm/withdraw summaries to chat
    - AudienceSyncEventHandler: Keeps the speaker audience in sync
    - GalleryTagEventHandler: Emails newly tagged speakers in batches

Handlers let their own failures propagate; the event bus isolates and logs
them so one integration failing never affects the others.
"""

from src.infrastructure.events.handlers.audience_sync_event_handler import (
    AudienceSyncEventHandler,
)
from src.infrastructure.events.handlers.gallery_tag_event_handler import (
    GalleryTagEventHandler,
)
from src.infrastructure.events.handlers.proposal_chat_event_handler import (
    ProposalChatEventHandler,
)
from src.infrastructure.events.handlers.proposal_email_event_handler import (
    ProposalEmailEventHandler,
)

__all__ = [
    "AudienceSyncEventHandler",
    "GalleryTagEventHandler",
    "ProposalChatEventHandler",
    "ProposalEmailEventHandler",
]
