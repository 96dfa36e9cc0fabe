"""Stub chat notifier used when no Slack webhook is configured."""

from typing import Any

from src.domain.protocols import LoggerProtocol


class StubChatNotifier:
    """ChatNotifierProtocol that only logs."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def post_message(self, channel: str, blocks: list[dict[str, Any]]) -> None:
        self._logger.info(
            "chat_message_would_be_posted",
            channel=channel,
            block_count=len(blocks),
        )
