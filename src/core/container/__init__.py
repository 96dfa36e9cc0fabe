"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_document_store, ...

The container is organized into modules:
- infrastructure: Outbound adapters (logging, document store, email, chat, clock)
- events: Event bus composition (built once by the app lifespan)
- handlers: Command handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_audience_client,
    get_chat_notifier,
    get_clock,
    get_document_store,
    get_email_sender,
    get_logger,
)

# Event bus
from src.core.container.events import (
    build_event_bus,
    get_event_bus,
    register_event_handlers,
)

# Command handlers
from src.core.container.handlers import get_process_agreement_event_handler

__all__ = [
    # Infrastructure
    "get_audience_client",
    "get_chat_notifier",
    "get_clock",
    "get_document_store",
    "get_email_sender",
    "get_logger",
    # Events
    "build_event_bus",
    "get_event_bus",
    "register_event_handlers",
    # Handlers
    "get_process_agreement_event_handler",
]
