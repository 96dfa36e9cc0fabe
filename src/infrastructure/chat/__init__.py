"""Team chat adapters."""

from src.infrastructure.chat.slack_adapter import SlackNotifier
from src.infrastructure.chat.stub_chat_notifier import StubChatNotifier

__all__ = ["SlackNotifier", "StubChatNotifier"]
