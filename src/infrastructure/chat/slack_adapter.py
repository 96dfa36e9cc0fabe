"""Slack incoming-webhook adapter for ChatNotifierProtocol.

The webhook URL is the whole endpoint, so requests go to an empty path.
Slack answers ``200 ok`` as plain text; the body is not parsed.
"""

from typing import Any

import httpx

from src.core.constants import HTTP_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.infrastructure.errors import ChatDeliveryError
from src.infrastructure.http import BaseHTTPClient


def _fallback_text(blocks: list[dict[str, Any]]) -> str:
    for block in blocks:
        text = block.get("text")
        if isinstance(text, dict) and text.get("text"):
            return str(text["text"])
    return "Notification"


class SlackNotifier(BaseHTTPClient):
    """Post Block Kit messages through a Slack incoming webhook."""

    error_class = ChatDeliveryError
    error_code = ErrorCode.CHAT_DELIVERY_FAILED

    def __init__(
        self,
        *,
        webhook_url: str,
        timeout: float = HTTP_TIMEOUT_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=webhook_url,
            service_name="slack",
            timeout=timeout,
            transport=transport,
        )

    async def post_message(self, channel: str, blocks: list[dict[str, Any]]) -> None:
        await self._request(
            method="POST",
            path="",
            json_data={
                "channel": channel,
                "text": _fallback_text(blocks),
                "blocks": blocks,
            },
            operation="post_message",
        )
