"""Unit tests for event bus composition.

Tests cover:
- Every EventType has at least one handler after build_event_bus
- register_event_handlers is idempotent (set semantics)
- End-to-end fan-out through the built bus with mocked ports
"""

from unittest.mock import MagicMock

import pytest

from src.core.container.events import (
    build_event_bus,
    get_event_bus,
    register_event_handlers,
)
from src.domain.enums import ProposalAction, ProposalStatus
from src.domain.events import EventType
from src.infrastructure.events import InMemoryEventBus
from src.infrastructure.events.handlers import (
    AudienceSyncEventHandler,
    GalleryTagEventHandler,
    ProposalChatEventHandler,
    ProposalEmailEventHandler,
)


@pytest.fixture
def event_bus(settings, mock_logger, email_sender, chat_notifier, audience):
    return build_event_bus(
        settings,
        mock_logger,
        email_sender=email_sender,
        chat_notifier=chat_notifier,
        audience=audience,
    )


@pytest.mark.unit
class TestEventRegistryCompleteness:
    """Every event type is wired to at least one handler."""

    def test_all_event_types_have_handlers(self, event_bus):
        missing = [t for t in EventType if event_bus.handler_count(t) == 0]
        assert missing == []

    def test_expected_handler_counts(self, event_bus, mock_logger):
        assert event_bus.handler_count(EventType.PROPOSAL_STATUS_CHANGED) == 3
        assert event_bus.handler_count(EventType.GALLERY_SPEAKER_TAGGED) == 1
        mock_logger.info.assert_called_with(
            "event_bus_configured", proposal_handlers=3, gallery_handlers=1
        )


@pytest.mark.unit
class TestRegisterEventHandlers:
    def test_registering_twice_keeps_one_subscription_each(
        self, settings, mock_logger, email_sender, chat_notifier, audience
    ):
        # Arrange
        bus = InMemoryEventBus(logger=mock_logger)
        handlers = dict(
            email_handler=ProposalEmailEventHandler(
                email_sender=email_sender, logger=mock_logger, settings=settings
            ),
            chat_handler=ProposalChatEventHandler(
                chat_notifier=chat_notifier, logger=mock_logger, settings=settings
            ),
            audience_handler=AudienceSyncEventHandler(
                audience=audience, logger=mock_logger
            ),
            gallery_handler=GalleryTagEventHandler(
                email_sender=email_sender, logger=mock_logger, settings=settings
            ),
        )

        # Act
        register_event_handlers(bus, **handlers)
        register_event_handlers(bus, **handlers)

        # Assert
        assert bus.handler_count(EventType.PROPOSAL_STATUS_CHANGED) == 3
        assert bus.handler_count(EventType.GALLERY_SPEAKER_TAGGED) == 1


@pytest.mark.unit
class TestBuiltBusFanOut:
    """Publishing through the composed bus reaches every integration."""

    async def test_confirm_reaches_chat_and_audience(
        self, event_bus, make_proposal_event, email_sender, chat_notifier, audience
    ):
        # Arrange
        event = make_proposal_event(
            action=ProposalAction.CONFIRM,
            previous_status=ProposalStatus.ACCEPTED,
            new_status=ProposalStatus.CONFIRMED,
        )

        # Act
        await event_bus.publish(event)

        # Assert
        chat_notifier.post_message.assert_awaited_once()
        assert audience.add_contact.await_count == 2
        email_sender.send.assert_not_awaited()

    async def test_chat_failure_does_not_block_audience_sync(
        self, event_bus, make_proposal_event, chat_notifier, audience, mock_logger
    ):
        # Arrange
        chat_notifier.post_message.side_effect = RuntimeError("slack down")
        event = make_proposal_event(
            action=ProposalAction.CONFIRM,
            previous_status=ProposalStatus.ACCEPTED,
            new_status=ProposalStatus.CONFIRMED,
        )

        # Act
        await event_bus.publish(event)

        # Assert
        assert audience.add_contact.await_count == 2
        failures = [
            c for c in mock_logger.warning.call_args_list
            if c.args[0] == "event_handler_failed"
        ]
        assert len(failures) == 1
        assert failures[0].kwargs["error_message"] == "slack down"

    async def test_accept_with_notify_sends_email(
        self, event_bus, make_proposal_event, email_sender, chat_notifier
    ):
        # Act
        await event_bus.publish(make_proposal_event(action=ProposalAction.ACCEPT))

        # Assert
        email_sender.send.assert_awaited_once()
        chat_notifier.post_message.assert_not_awaited()


@pytest.mark.unit
class TestGetEventBus:
    def test_returns_bus_from_app_state(self):
        request = MagicMock()
        sentinel = object()
        request.app.state.event_bus = sentinel

        assert get_event_bus(request) is sentinel
