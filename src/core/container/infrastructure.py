"""Infrastructure dependency factories.

Application-scoped singletons for outbound integrations:
- Logging (console)
- Document store (Sanity)
- Email and audiences (Resend, or logging stubs when no API key is set)
- Chat (Slack, or a logging stub when no webhook is set)
- Clock

Usage:
    # Application Layer (direct use)
    store = get_document_store()

    # Presentation Layer (FastAPI Depends)
    store: DocumentStoreProtocol = Depends(get_document_store)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols import (
        AudienceProtocol,
        ChatNotifierProtocol,
        ClockProtocol,
        DocumentStoreProtocol,
        EmailSenderProtocol,
        LoggerProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.core.enums import Environment
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment in {Environment.TESTING, Environment.CI}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_document_store() -> "DocumentStoreProtocol":
    """Get document store singleton (app-scoped).

    Returns:
        SanityDocumentStore configured from settings.
    """
    from src.infrastructure.document_store import SanityDocumentStore

    settings = get_settings()
    return SanityDocumentStore(
        base_url=settings.sanity_api_base_url,
        dataset=settings.sanity_dataset,
        token=settings.sanity_api_token,
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_email_sender() -> "EmailSenderProtocol":
    """Get email sender singleton (app-scoped).

    Returns correct adapter based on configuration:
        - RESEND_API_KEY set: ResendEmailSender
        - otherwise: StubEmailSender (logs to console)
    """
    from src.infrastructure.email import ResendEmailSender, StubEmailSender

    settings = get_settings()
    if not settings.resend_api_key:
        return StubEmailSender(logger=get_logger())

    return ResendEmailSender(
        api_key=settings.resend_api_key,
        from_address=settings.email_from_address,
        base_url=settings.resend_api_base_url,
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_audience_client() -> "AudienceProtocol":
    """Get audience client singleton (app-scoped).

    Returns ResendAudienceClient when RESEND_API_KEY is set, otherwise
    StubAudienceClient.
    """
    from src.infrastructure.email import ResendAudienceClient, StubAudienceClient

    settings = get_settings()
    if not settings.resend_api_key:
        return StubAudienceClient(logger=get_logger())

    return ResendAudienceClient(
        api_key=settings.resend_api_key,
        base_url=settings.resend_api_base_url,
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_chat_notifier() -> "ChatNotifierProtocol":
    """Get chat notifier singleton (app-scoped).

    Returns SlackNotifier when SLACK_WEBHOOK_URL is set, otherwise
    StubChatNotifier.
    """
    from src.infrastructure.chat import SlackNotifier, StubChatNotifier

    settings = get_settings()
    if not settings.slack_webhook_url:
        return StubChatNotifier(logger=get_logger())

    return SlackNotifier(
        webhook_url=settings.slack_webhook_url,
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Get system clock singleton (app-scoped)."""
    from src.infrastructure.clock import SystemClock

    return SystemClock()
