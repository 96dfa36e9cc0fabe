"""Audience sync event handler.

Keeps the "<conference> Speakers" mailing-list audience in line with
confirmed talks: a confirmation adds every speaker on the proposal, a
withdrawal removes them.

Speakers are synced concurrently and each outcome is logged on its own;
one speaker failing never blocks the others.
"""

import asyncio

from src.domain.enums import ProposalAction, ProposalStatus
from src.domain.events import ProposalStatusChanged
from src.domain.protocols import AudienceContact, AudienceProtocol, LoggerProtocol
from src.domain.value_objects import Speaker

_SYNC_ACTIONS = frozenset({ProposalAction.CONFIRM, ProposalAction.WITHDRAW})


def speaker_audience_name(conference_title: str) -> str:
    return f"{conference_title} Speakers"


class AudienceSyncEventHandler:
    """Add or remove proposal speakers from the conference speaker audience.

    Attributes:
        _audience: Mailing-list audience port.
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, audience: AudienceProtocol, logger: LoggerProtocol) -> None:
        self._audience = audience
        self._logger = logger

    async def _sync_speaker(self, audience_id: str, speaker: Speaker, add: bool) -> None:
        email = speaker.email or ""
        if add:
            await self._audience.add_contact(
                audience_id,
                AudienceContact(
                    email=email,
                    first_name=speaker.first_name,
                    last_name=speaker.last_name,
                ),
            )
        else:
            await self._audience.remove_contact(audience_id, email)

    async def handle_proposal_status_changed(
        self,
        event: ProposalStatusChanged,
    ) -> None:
        """Sync every speaker on a confirmed or withdrawn proposal.

        Args:
            event: ProposalStatusChanged event.

        Raises:
            AudienceError: Audience lookup/creation failed (handled by the
                event bus). Per-speaker failures are logged, not raised.
        """
        if event.action not in _SYNC_ACTIONS:
            return

        if event.new_status == ProposalStatus.CONFIRMED:
            add = True
        elif event.new_status == ProposalStatus.WITHDRAWN:
            add = False
        else:
            return

        audience_id = await self._audience.get_or_create_audience(
            speaker_audience_name(event.conference.title)
        )
        operation = "add" if add else "remove"

        eligible: list[Speaker] = []
        for speaker in event.speakers:
            if speaker.has_contact_address:
                eligible.append(speaker)
            else:
                self._logger.warning(
                    "audience_sync_speaker_skipped",
                    event_id=str(event.event_id),
                    speaker_id=speaker.id,
                    reason="no_email",
                )

        results = await asyncio.gather(
            *(self._sync_speaker(audience_id, s, add) for s in eligible),
            return_exceptions=True,
        )

        for speaker, result in zip(eligible, results, strict=True):
            if isinstance(result, Exception):
                self._logger.warning(
                    "audience_sync_speaker_failed",
                    event_id=str(event.event_id),
                    audience_id=audience_id,
                    speaker_id=speaker.id,
                    operation=operation,
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
            else:
                self._logger.info(
                    "audience_sync_speaker_succeeded",
                    event_id=str(event.event_id),
                    audience_id=audience_id,
                    speaker_id=speaker.id,
                    operation=operation,
                )
