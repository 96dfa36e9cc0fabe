"""Proposal chat event handler.

Posts a summary to the CFP chat channel when a speaker confirms or withdraws
an accepted talk. No retry: a failed post is logged by the event bus.
"""

from typing import Any

from src.core.config import Settings
from src.domain.enums import ProposalAction
from src.domain.events import ProposalStatusChanged
from src.domain.protocols import ChatNotifierProtocol, LoggerProtocol

_HEADLINES: dict[ProposalAction, str] = {
    ProposalAction.CONFIRM: "✅ Talk Confirmed",
    ProposalAction.WITHDRAW: "❌ Talk Withdrawn",
}


def build_status_change_blocks(event: ProposalStatusChanged) -> list[dict[str, Any]]:
    """Slack blocks summarizing a confirm/withdraw.

    The admin button is omitted when the conference has no domain.
    """
    speaker_names = ", ".join(s.name for s in event.speakers) or "Unknown speaker"
    blocks: list[dict[str, Any]] = [
        {
            "type": "header",
            "text": {"type": "plain_text", "text": _HEADLINES[event.action]},
        },
        {
            "type": "section",
            "fields": [
                {"type": "mrkdwn", "text": f"*Title:*\n{event.proposal.title}"},
                {"type": "mrkdwn", "text": f"*Speaker:*\n{speaker_names}"},
                {
                    "type": "mrkdwn",
                    "text": (
                        f"*Status:*\n{event.previous_status.value}"
                        f" → {event.new_status.value}"
                    ),
                },
                {"type": "mrkdwn", "text": f"*Conference:*\n{event.conference.title}"},
            ],
        },
    ]

    domain = event.conference.primary_domain
    if domain:
        blocks.append(
            {
                "type": "actions",
                "elements": [
                    {
                        "type": "button",
                        "text": {"type": "plain_text", "text": "Review Proposal"},
                        "url": f"https://{domain}/admin/proposals/{event.proposal.id}",
                    }
                ],
            }
        )
    return blocks


class ProposalChatEventHandler:
    """Notify organizers in chat about confirmations and withdrawals.

    Attributes:
        _chat_notifier: Chat port.
        _logger: Logger protocol implementation (from container).
        _settings: Application settings (default channel).
    """

    def __init__(
        self,
        chat_notifier: ChatNotifierProtocol,
        logger: LoggerProtocol,
        settings: Settings,
    ) -> None:
        self._chat_notifier = chat_notifier
        self._logger = logger
        self._settings = settings

    async def handle_proposal_status_changed(
        self,
        event: ProposalStatusChanged,
    ) -> None:
        if event.action not in _HEADLINES:
            return

        channel = event.conference.cfp_notification_channel or self._settings.slack_channel
        await self._chat_notifier.post_message(
            channel, build_status_change_blocks(event)
        )

        self._logger.info(
            "proposal_chat_notification_sent",
            event_id=str(event.event_id),
            proposal_id=event.proposal.id,
            action=event.action.value,
            channel=channel,
        )
