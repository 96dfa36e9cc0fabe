"""Resend adapter for EmailSenderProtocol.

Renders the named template and posts it to ``POST /emails``. The recipient
is validated and normalized through the Email value object before sending.
"""

from typing import Any

import httpx

from src.core.constants import HTTP_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.domain.value_objects import Email
from src.infrastructure.email.templates import render_template
from src.infrastructure.errors import EmailDeliveryError
from src.infrastructure.http import BaseHTTPClient


class ResendEmailSender(BaseHTTPClient):
    """Send templated email through the Resend API.

    Attributes:
        _api_key: Resend API key.
        _from_address: Sender ("Name <address>").
    """

    error_class = EmailDeliveryError
    error_code = ErrorCode.EMAIL_DELIVERY_FAILED

    def __init__(
        self,
        *,
        api_key: str | None,
        from_address: str,
        base_url: str = "https://api.resend.com",
        timeout: float = HTTP_TIMEOUT_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            service_name="resend",
            timeout=timeout,
            transport=transport,
        )
        self._api_key = api_key
        self._from_address = from_address

    def _default_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key or ''}"}

    async def send(self, to: str, template: str, data: dict[str, Any]) -> None:
        """Render and send one email.

        Raises:
            ValueError: Invalid recipient address.
            KeyError: Unknown template.
            EmailDeliveryError: Resend rejected the request or was unreachable.
        """
        recipient = Email(to)
        rendered = render_template(template, data)

        payload: dict[str, Any] = {
            "from": self._from_address,
            "to": [str(recipient)],
            "subject": rendered.subject,
            "html": rendered.html,
        }
        if reply_to := data.get("reply_to"):
            payload["reply_to"] = reply_to

        await self._request_json(
            method="POST",
            path="/emails",
            json_data=payload,
            operation=f"send_{template}",
        )
