"""ChatNotifierProtocol - Port for team chat notifications."""

from typing import Any, Protocol


class ChatNotifierProtocol(Protocol):
    """Post a message to a team chat channel."""

    async def post_message(self, channel: str, blocks: list[dict[str, Any]]) -> None:
        """Post a block-formatted message.

        Args:
            channel: Channel name (e.g., "#cfp").
            blocks: Message blocks (Slack Block Kit structure).

        Raises:
            ChatDeliveryError: Transport or API failure. Not retried.
        """
        ...
