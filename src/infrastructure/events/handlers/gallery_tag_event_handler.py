"""Gallery tag event handler.

Emails speakers who were newly tagged in a gallery photo.

Sends run in fixed-size batches (``gallery_notification_batch_size``) to stay
under the email provider's rate limit. Each batch runs concurrently and the
handler reports one summary when done:

    - every send failed → error
    - some sends failed → warning (with failing names and reasons)
    - every send succeeded → info

Counts always satisfy ``sent + failed == attempted``; speakers without an
email address are skipped before counting.
"""

import asyncio
from typing import Any

from src.core.config import Settings
from src.domain.events import GallerySpeakerTagged
from src.domain.protocols import EmailSenderProtocol, LoggerProtocol
from src.domain.value_objects import Speaker

GALLERY_TAG_TEMPLATE = "gallery_speaker_tagged"


class GalleryTagEventHandler:
    """Notify newly tagged speakers in batches.

    Attributes:
        _email_sender: Outbound email port.
        _logger: Logger protocol implementation (from container).
        _settings: Application settings (batch size, gallery URL).
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

    def _template_data(self, event: GallerySpeakerTagged, speaker: Speaker) -> dict[str, Any]:
        image = event.image
        return {
            "speaker_name": speaker.name,
            "conference_title": image.conference_title,
            "image_url": image.image_url,
            "photographer": image.photographer,
            "location": image.location,
            "date": image.date,
            "gallery_url": f"{self._settings.public_base_url.rstrip('/')}/gallery",
        }

    async def _notify(self, event: GallerySpeakerTagged, speaker: Speaker) -> None:
        await self._email_sender.send(
            speaker.email or "",
            GALLERY_TAG_TEMPLATE,
            self._template_data(event, speaker),
        )

    async def handle_gallery_speaker_tagged(self, event: GallerySpeakerTagged) -> None:
        recipients: list[Speaker] = []
        for speaker in event.speakers:
            if speaker.has_contact_address:
                recipients.append(speaker)
            else:
                self._logger.info(
                    "gallery_tag_notification_skipped",
                    event_id=str(event.event_id),
                    image_id=event.image.id,
                    speaker_id=speaker.id,
                    reason="no_email",
                )

        if not recipients:
            return

        batch_size = self._settings.gallery_notification_batch_size
        sent = 0
        failures: list[tuple[Speaker, Exception]] = []

        for start in range(0, len(recipients), batch_size):
            batch = recipients[start : start + batch_size]
            results = await asyncio.gather(
                *(self._notify(event, speaker) for speaker in batch),
                return_exceptions=True,
            )
            for speaker, result in zip(batch, results, strict=True):
                if isinstance(result, Exception):
                    failures.append((speaker, result))
                else:
                    sent += 1

        attempted = len(recipients)
        summary: dict[str, Any] = {
            "event_id": str(event.event_id),
            "image_id": event.image.id,
            "attempted": attempted,
            "sent": sent,
            "failed": len(failures),
        }

        if not failures:
            self._logger.info("gallery_tag_notifications_sent", **summary)
            return

        failed_speakers = [
            {"name": speaker.name, "reason": str(error)} for speaker, error in failures
        ]
        if sent == 0:
            self._logger.error(
                "gallery_tag_notifications_failed",
                failed_speakers=failed_speakers,
                **summary,
            )
        else:
            self._logger.warning(
                "gallery_tag_notifications_partially_failed",
                failed_speakers=failed_speakers,
                **summary,
            )
