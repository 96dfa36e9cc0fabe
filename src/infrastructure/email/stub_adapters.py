"""Stub email and audience adapters for development/testing.

Used by the container when no Resend API key is configured. They log what
would have been sent instead of calling the API.
"""

from typing import Any

from src.domain.protocols import AudienceContact, LoggerProtocol


class StubEmailSender:
    """EmailSenderProtocol that only logs."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def send(self, to: str, template: str, data: dict[str, Any]) -> None:
        self._logger.info(
            "email_would_be_sent",
            recipient=to,
            template=template,
            data_keys=sorted(data),
        )


class StubAudienceClient:
    """AudienceProtocol that only logs; every audience has a synthetic ID."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def get_or_create_audience(self, name: str) -> str:
        return f"stub-{name.lower().replace(' ', '-')}"

    async def add_contact(self, audience_id: str, contact: AudienceContact) -> None:
        self._logger.info(
            "audience_contact_would_be_added",
            audience_id=audience_id,
            email=contact.email,
        )

    async def remove_contact(self, audience_id: str, email: str) -> None:
        self._logger.info(
            "audience_contact_would_be_removed",
            audience_id=audience_id,
            email=email,
        )
