"""Proposal email event handler.

Emails the primary speaker when an organizer accepts, rejects or reminds
about a proposal and chose to notify.

Templates:
    - ProposalAction.ACCEPT → proposal_accepted
    - ProposalAction.REJECT → proposal_rejected
    - ProposalAction.REMIND → proposal_reminder

Usage:
    >>> handler = ProposalEmailEventHandler(
    ...     email_sender=email_sender, logger=logger, settings=settings
    ... )
    >>> event_bus.subscribe(
    ...     EventType.PROPOSAL_STATUS_CHANGED,
    ...     handler.handle_proposal_status_changed,
    ... )
"""

from typing import Any

from src.core.config import Settings
from src.domain.enums import ProposalAction
from src.domain.events import ProposalStatusChanged
from src.domain.protocols import EmailSenderProtocol, LoggerProtocol

PROPOSAL_EMAIL_TEMPLATES: dict[ProposalAction, str] = {
    ProposalAction.ACCEPT: "proposal_accepted",
    ProposalAction.REJECT: "proposal_rejected",
    ProposalAction.REMIND: "proposal_reminder",
}


class ProposalEmailEventHandler:
    """Send speaker emails for organizer decisions.

    Delivery failures propagate; the event bus logs them.

    Attributes:
        _email_sender: Outbound email port.
        _logger: Logger protocol implementation (from container).
        _settings: Application settings (fallback public URL).
    """

    def __init__(
        self,
        email_sender: EmailSenderProtocol,
        logger: LoggerProtocol,
        settings: Settings,
    ) -> None:
        self._email_sender = email_sender
        self._logger = logger
        self._settings = settings

    def _confirm_url(self, event: ProposalStatusChanged) -> str:
        domain = event.metadata.domain or event.conference.primary_domain
        base_url = f"https://{domain}" if domain else self._settings.public_base_url
        return f"{base_url.rstrip('/')}/cfp/list"

    def _template_data(self, event: ProposalStatusChanged) -> dict[str, Any]:
        speaker = event.primary_speaker
        return {
            "speaker_name": speaker.name if speaker else "",
            "proposal_title": event.proposal.title,
            "conference_title": event.conference.title,
            "comment": event.metadata.comment or "",
            "confirm_url": self._confirm_url(event),
            "reply_to": event.conference.cfp_email,
        }

    async def handle_proposal_status_changed(
        self,
        event: ProposalStatusChanged,
    ) -> None:
        """Email the primary speaker about the organizer's decision.

        Skips silently unless the organizer asked to notify and the action
        has a template.

        Args:
            event: ProposalStatusChanged event.

        Raises:
            EmailDeliveryError: Transport failure (handled by the event bus).
        """
        if not event.metadata.should_notify:
            return

        template = PROPOSAL_EMAIL_TEMPLATES.get(event.action)
        if template is None:
            return

        speaker = event.primary_speaker
        if speaker is None:
            return
        if not speaker.has_contact_address:
            self._logger.warning(
                "proposal_email_skipped",
                event_id=str(event.event_id),
                proposal_id=event.proposal.id,
                action=event.action.value,
                reason="no_speaker_email",
            )
            return

        await self._email_sender.send(
            speaker.email or "",
            template,
            self._template_data(event),
        )

        self._logger.info(
            "proposal_email_sent",
            event_id=str(event.event_id),
            proposal_id=event.proposal.id,
            speaker_id=speaker.id,
            template=template,
        )
