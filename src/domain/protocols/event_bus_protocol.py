"""Event bus protocol (port) for domain events.

Hexagonal Architecture port: the domain defines the interface, the
infrastructure provides the adapter (InMemoryEventBus).

Usage:
    >>> bus.subscribe(EventType.PROPOSAL_STATUS_CHANGED, handler.handle_proposal_status_changed)
    >>> await bus.publish(ProposalStatusChanged(...))
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from src.domain.events.base_event import DomainEvent, EventType

EventHandler = Callable[[Any], Awaitable[None]]
"""Async handler taking one event and returning None.

Handlers may raise freely; the bus catches, logs and isolates failures.
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open**: one handler failure never prevents sibling handlers
           from running and never reaches the publisher.
        2. **Concurrent**: all handlers for an event run concurrently and
           publish waits for all of them to settle.
        3. **Set semantics**: subscribing the same handler twice to one event
           type results in a single invocation per publish.
        4. **Best effort**: nothing is persisted; work in flight is lost if
           the process stops.
    """

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Register handler for an event type (idempotent per handler)."""
        ...

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Remove handler; unknown handlers are ignored."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver event to every handler of ``event.event_type``.

        Never raises because of a handler. No handlers is a no-op.
        """
        ...
