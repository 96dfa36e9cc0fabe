"""Domain protocols (ports).

Structural interfaces the domain and application layers depend on;
infrastructure provides the adapters.
"""

from src.domain.protocols.audience_protocol import AudienceContact, AudienceProtocol
from src.domain.protocols.chat_protocol import ChatNotifierProtocol
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.document_store_protocol import (
    AssetStoreProtocol,
    DocumentStoreProtocol,
    PatchProtocol,
)
from src.domain.protocols.email_protocol import EmailSenderProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AssetStoreProtocol",
    "AudienceContact",
    "AudienceProtocol",
    "ChatNotifierProtocol",
    "ClockProtocol",
    "DocumentStoreProtocol",
    "EmailSenderProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PatchProtocol",
]
