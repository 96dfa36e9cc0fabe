"""Unit tests for proposal event handlers.

Tests cover:
- ProposalEmailEventHandler: notify flag, action filter, missing speaker
  email, template data and confirm URL
- ProposalChatEventHandler: confirm/withdraw only, channel selection,
  Slack block layout
- AudienceSyncEventHandler: add on confirm, remove on withdraw,
  per-speaker failure isolation
"""

import pytest

from src.core.enums import ErrorCode
from src.domain.enums import ProposalAction, ProposalStatus
from src.domain.protocols import AudienceContact
from src.domain.value_objects import ConferenceSnapshot, Speaker
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import AudienceError, ExternalServiceError
from src.infrastructure.events.handlers import (
    AudienceSyncEventHandler,
    ProposalChatEventHandler,
    ProposalEmailEventHandler,
)
from src.infrastructure.events.handlers.audience_sync_event_handler import (
    speaker_audience_name,
)
from src.infrastructure.events.handlers.proposal_chat_event_handler import (
    build_status_change_blocks,
)


def _audience_error(message: str) -> AudienceError:
    return AudienceError(
        ExternalServiceError(
            code=ErrorCode.AUDIENCE_SYNC_FAILED,
            infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_ERROR,
            message=message,
            service_name="resend",
        )
    )


@pytest.mark.unit
class TestProposalEmailEventHandler:
    """Test speaker emails for organizer decisions."""

    @pytest.fixture
    def handler(self, email_sender, mock_logger, settings):
        return ProposalEmailEventHandler(
            email_sender=email_sender, logger=mock_logger, settings=settings
        )

    @pytest.mark.parametrize(
        ("action", "template"),
        [
            (ProposalAction.ACCEPT, "proposal_accepted"),
            (ProposalAction.REJECT, "proposal_rejected"),
            (ProposalAction.REMIND, "proposal_reminder"),
        ],
    )
    async def test_sends_template_for_organizer_action(
        self, handler, email_sender, make_proposal_event, action, template
    ):
        # Arrange
        event = make_proposal_event(action=action, comment="See you there")

        # Act
        await handler.handle_proposal_status_changed(event)

        # Assert
        email_sender.send.assert_awaited_once()
        to, sent_template, data = email_sender.send.await_args.args
        assert to == "ada@example.com"
        assert sent_template == template
        assert data["speaker_name"] == "Ada Lovelace"
        assert data["proposal_title"] == "Scaling Kubernetes Operators"
        assert data["conference_title"] == "Cloud Native Days Norway 2026"
        assert data["comment"] == "See you there"
        assert data["reply_to"] == "cfp@cloudnativedays.no"

    async def test_skips_when_notify_flag_false(
        self, handler, email_sender, make_proposal_event
    ):
        # Act
        await handler.handle_proposal_status_changed(
            make_proposal_event(should_notify=False)
        )

        # Assert
        email_sender.send.assert_not_awaited()

    @pytest.mark.parametrize(
        "action",
        [ProposalAction.CONFIRM, ProposalAction.WITHDRAW, ProposalAction.SUBMIT],
    )
    async def test_skips_actions_without_template(
        self, handler, email_sender, make_proposal_event, action
    ):
        # Act
        await handler.handle_proposal_status_changed(make_proposal_event(action=action))

        # Assert
        email_sender.send.assert_not_awaited()

    async def test_skips_and_warns_when_primary_speaker_has_no_email(
        self, handler, email_sender, mock_logger, make_proposal_event
    ):
        # Arrange
        event = make_proposal_event(
            speakers=(
                Speaker(id="spk-1", name="No Mail", email="  "),
                Speaker(id="spk-2", name="Has Mail", email="has@example.com"),
            )
        )

        # Act
        await handler.handle_proposal_status_changed(event)

        # Assert - secondary speakers are never emailed
        email_sender.send.assert_not_awaited()
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args == ("proposal_email_skipped",)

    async def test_skips_silently_when_no_speakers(
        self, handler, email_sender, mock_logger, make_proposal_event
    ):
        # Act
        await handler.handle_proposal_status_changed(make_proposal_event(speakers=()))

        # Assert
        email_sender.send.assert_not_awaited()
        mock_logger.warning.assert_not_called()

    async def test_confirm_url_prefers_action_domain(
        self, handler, email_sender, make_proposal_event
    ):
        # Act
        await handler.handle_proposal_status_changed(
            make_proposal_event(domain="2026.cloudnativedays.no")
        )

        # Assert
        data = email_sender.send.await_args.args[2]
        assert data["confirm_url"] == "https://2026.cloudnativedays.no/cfp/list"

    async def test_confirm_url_falls_back_to_conference_domain(
        self, handler, email_sender, make_proposal_event
    ):
        # Act
        await handler.handle_proposal_status_changed(make_proposal_event())

        # Assert
        data = email_sender.send.await_args.args[2]
        assert data["confirm_url"] == "https://cloudnativedays.no/cfp/list"

    async def test_confirm_url_falls_back_to_public_base_url(
        self, handler, email_sender, make_proposal_event
    ):
        # Arrange
        conference = ConferenceSnapshot(id="conf-2", title="No Domain Conf")

        # Act
        await handler.handle_proposal_status_changed(
            make_proposal_event(conference=conference)
        )

        # Assert
        data = email_sender.send.await_args.args[2]
        assert data["confirm_url"] == "https://cloudnativedays.no/cfp/list"
        assert data["reply_to"] is None

    async def test_delivery_error_propagates(
        self, handler, email_sender, mock_logger, make_proposal_event
    ):
        # Arrange
        email_sender.send.side_effect = RuntimeError("resend down")

        # Act & Assert - the event bus isolates this
        with pytest.raises(RuntimeError, match="resend down"):
            await handler.handle_proposal_status_changed(make_proposal_event())
        mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestProposalChatEventHandler:
    """Test chat notifications for confirmations and withdrawals."""

    @pytest.fixture
    def handler(self, chat_notifier, mock_logger, settings):
        return ProposalChatEventHandler(
            chat_notifier=chat_notifier, logger=mock_logger, settings=settings
        )

    async def test_posts_confirmation_to_conference_channel(
        self, handler, chat_notifier, make_proposal_event
    ):
        # Arrange
        event = make_proposal_event(
            action=ProposalAction.CONFIRM,
            previous_status=ProposalStatus.ACCEPTED,
            new_status=ProposalStatus.CONFIRMED,
        )

        # Act
        await handler.handle_proposal_status_changed(event)

        # Assert
        chat_notifier.post_message.assert_awaited_once()
        channel, blocks = chat_notifier.post_message.await_args.args
        assert channel == "#cfp-2026"
        assert blocks[0]["text"]["text"] == "✅ Talk Confirmed"

    async def test_uses_default_channel_without_conference_channel(
        self, handler, chat_notifier, make_proposal_event
    ):
        # Arrange
        event = make_proposal_event(
            action=ProposalAction.WITHDRAW,
            previous_status=ProposalStatus.CONFIRMED,
            new_status=ProposalStatus.WITHDRAWN,
            conference=ConferenceSnapshot(id="conf-2", title="Other"),
        )

        # Act
        await handler.handle_proposal_status_changed(event)

        # Assert
        channel, blocks = chat_notifier.post_message.await_args.args
        assert channel == "#cfp"
        assert blocks[0]["text"]["text"] == "❌ Talk Withdrawn"

    @pytest.mark.parametrize(
        "action",
        [ProposalAction.ACCEPT, ProposalAction.REJECT, ProposalAction.SUBMIT],
    )
    async def test_ignores_other_actions(
        self, handler, chat_notifier, make_proposal_event, action
    ):
        # Act
        await handler.handle_proposal_status_changed(make_proposal_event(action=action))

        # Assert
        chat_notifier.post_message.assert_not_awaited()

    def test_blocks_include_summary_fields_and_admin_link(self, make_proposal_event):
        # Arrange
        event = make_proposal_event(
            action=ProposalAction.CONFIRM,
            previous_status=ProposalStatus.ACCEPTED,
            new_status=ProposalStatus.CONFIRMED,
        )

        # Act
        blocks = build_status_change_blocks(event)

        # Assert
        fields = [f["text"] for f in blocks[1]["fields"]]
        assert "*Title:*\nScaling Kubernetes Operators" in fields
        assert "*Speaker:*\nAda Lovelace, Grace Brewster Hopper" in fields
        assert "*Status:*\naccepted → confirmed" in fields
        assert "*Conference:*\nCloud Native Days Norway 2026" in fields
        button = blocks[2]["elements"][0]
        assert button["url"] == "https://cloudnativedays.no/admin/proposals/prop-1"

    def test_blocks_omit_admin_link_without_domain(self, make_proposal_event):
        # Arrange
        event = make_proposal_event(
            action=ProposalAction.CONFIRM,
            conference=ConferenceSnapshot(id="conf-2", title="Other"),
        )

        # Act
        blocks = build_status_change_blocks(event)

        # Assert
        assert [b["type"] for b in blocks] == ["header", "section"]


@pytest.mark.unit
class TestAudienceSyncEventHandler:
    """Test speaker audience sync."""

    @pytest.fixture
    def handler(self, audience, mock_logger):
        return AudienceSyncEventHandler(audience=audience, logger=mock_logger)

    @pytest.fixture
    def confirm_event(self, make_proposal_event):
        return make_proposal_event(
            action=ProposalAction.CONFIRM,
            previous_status=ProposalStatus.ACCEPTED,
            new_status=ProposalStatus.CONFIRMED,
        )

    @pytest.fixture
    def withdraw_event(self, make_proposal_event):
        return make_proposal_event(
            action=ProposalAction.WITHDRAW,
            previous_status=ProposalStatus.CONFIRMED,
            new_status=ProposalStatus.WITHDRAWN,
        )

    def test_audience_name(self):
        assert speaker_audience_name("KubeDay 2026") == "KubeDay 2026 Speakers"

    async def test_confirm_adds_every_speaker(self, handler, audience, confirm_event):
        # Act
        await handler.handle_proposal_status_changed(confirm_event)

        # Assert
        audience.get_or_create_audience.assert_awaited_once_with(
            "Cloud Native Days Norway 2026 Speakers"
        )
        added = {c.args[1] for c in audience.add_contact.await_args_list}
        assert added == {
            AudienceContact(
                email="ada@example.com", first_name="Ada", last_name="Lovelace"
            ),
            AudienceContact(
                email="grace@example.com",
                first_name="Grace",
                last_name="Brewster Hopper",
            ),
        }
        audience.remove_contact.assert_not_awaited()

    async def test_withdraw_removes_every_speaker(
        self, handler, audience, withdraw_event
    ):
        # Act
        await handler.handle_proposal_status_changed(withdraw_event)

        # Assert
        removed = {c.args for c in audience.remove_contact.await_args_list}
        assert removed == {("aud-1", "ada@example.com"), ("aud-1", "grace@example.com")}
        audience.add_contact.assert_not_awaited()

    async def test_ignores_other_actions(self, handler, audience, make_proposal_event):
        # Act
        await handler.handle_proposal_status_changed(
            make_proposal_event(action=ProposalAction.ACCEPT)
        )

        # Assert
        audience.get_or_create_audience.assert_not_awaited()

    async def test_ignores_confirm_with_unexpected_status(
        self, handler, audience, make_proposal_event
    ):
        # Arrange
        event = make_proposal_event(
            action=ProposalAction.CONFIRM, new_status=ProposalStatus.ACCEPTED
        )

        # Act
        await handler.handle_proposal_status_changed(event)

        # Assert
        audience.get_or_create_audience.assert_not_awaited()

    async def test_one_speaker_failure_does_not_block_others(
        self, handler, audience, mock_logger, confirm_event
    ):
        # Arrange
        async def add_contact(audience_id, contact):
            if contact.email == "ada@example.com":
                raise _audience_error("rate limited")

        audience.add_contact.side_effect = add_contact

        # Act
        await handler.handle_proposal_status_changed(confirm_event)

        # Assert
        assert audience.add_contact.await_count == 2
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args == ("audience_sync_speaker_failed",)
        assert mock_logger.warning.call_args.kwargs["speaker_id"] == "spk-1"
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.kwargs["speaker_id"] == "spk-2"

    async def test_speakers_without_email_are_skipped(
        self, handler, audience, mock_logger, make_proposal_event
    ):
        # Arrange
        event = make_proposal_event(
            action=ProposalAction.CONFIRM,
            new_status=ProposalStatus.CONFIRMED,
            speakers=(
                Speaker(id="spk-1", name="No Mail"),
                Speaker(id="spk-2", name="Has Mail", email="has@example.com"),
            ),
        )

        # Act
        await handler.handle_proposal_status_changed(event)

        # Assert
        audience.add_contact.assert_awaited_once()
        assert mock_logger.warning.call_args.args == ("audience_sync_speaker_skipped",)

    async def test_audience_lookup_failure_propagates(
        self, handler, audience, confirm_event
    ):
        # Arrange
        audience.get_or_create_audience.side_effect = _audience_error("unauthorized")

        # Act & Assert
        with pytest.raises(AudienceError):
            await handler.handle_proposal_status_changed(confirm_event)
        audience.add_contact.assert_not_awaited()
