"""In-memory event bus implementation.

This module implements the EventBusProtocol using an in-memory dictionary-based
registry. Suitable for single-process deployments; nothing is persisted and
events in flight are lost on shutdown.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (EventType → set of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)
    - Error logging for handler failures

Usage:
    >>> # Composition root builds one bus per process (see container.events)
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(EventType.PROPOSAL_STATUS_CHANGED, handler.handle_proposal_status_changed)
    >>> await bus.publish(ProposalStatusChanged(...))
"""

import asyncio

from src.domain.events.base_event import DomainEvent, EventType
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Implements EventBusProtocol using a dictionary of handler sets keyed by
    EventType. Executes handlers concurrently with asyncio.gather and fail-open
    error handling (one handler failure doesn't prevent other handlers from
    executing).

    Thread Safety:
        - NOT thread-safe (single-process, single-threaded async design)

    Attributes:
        _handlers: Dictionary mapping event types to handler sets. A topic
            with no handlers has no key.
        _logger: Logger for handler failures and event publishing.

    Design Decisions:
        - **Fail-open**: Handler failures logged but not propagated
        - **Concurrent**: asyncio.gather for parallel handler execution
        - **No ordering**: Handlers execute concurrently (order undefined)
        - **Set semantics**: Same handler subscribed twice runs once
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning level) and event
                publishing (debug level).
        """
        self._handlers: dict[EventType, set[EventHandler]] = {}
        self._logger = logger

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Event type discriminant to handle.
            handler: Async callable taking the event. Bound methods of the same
                instance compare equal, so re-registering is a no-op.
        """
        self._handlers.setdefault(event_type, set()).add(handler)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Remove handler from event type.

        Removing the last handler deletes the topic. Unknown handlers and
        unknown event types are ignored.
        """
        handlers = self._handlers.get(event_type)
        if handlers is None:
            return

        handlers.discard(handler)
        if not handlers:
            del self._handlers[event_type]

    def handler_count(self, event_type: EventType) -> int:
        """Number of handlers currently subscribed to event_type."""
        return len(self._handlers.get(event_type, ()))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Executes all handlers concurrently with fail-open behavior. Handler
        exceptions are logged but NOT propagated to publisher. If no handlers
        are registered, this is a no-op (not an error).

        Args:
            event: Domain event to publish. All handlers registered for
                event.event_type will be called.

        Flow:
            1. Snapshot handlers for event.event_type
            2. If no handlers, return immediately (no-op)
            3. Execute all handlers with asyncio.gather(return_exceptions=True)
            4. Log any handler exceptions (warning level)
            5. Return (never raise handler exceptions)
        """
        event_type = event.event_type
        # Snapshot so handlers may (un)subscribe while running
        handlers = list(self._handlers.get(event_type, ()))

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.value,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for handler, result in zip(handlers, results, strict=True):
            if isinstance(result, BaseException):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.value,
                    event_id=str(event.event_id),
                    handler_name=_handler_name(handler),
                    error_type=type(result).__name__,
                    error_message=str(result),
                    exc_info=result,
                )
