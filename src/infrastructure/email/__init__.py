"""Email service implementations.

This package contains Resend adapters and logging stubs:
- ResendEmailSender: Templated transactional email (EmailSenderProtocol)
- ResendAudienceClient: Mailing-list audiences (AudienceProtocol)
- StubEmailSender, StubAudienceClient: Log-only stand-ins when no API key is set
"""

from src.infrastructure.email.resend_adapter import ResendEmailSender
from src.infrastructure.email.resend_audience_adapter import ResendAudienceClient
from src.infrastructure.email.stub_adapters import StubAudienceClient, StubEmailSender
from src.infrastructure.email.templates import RenderedEmail, render_template

__all__ = [
    "RenderedEmail",
    "ResendAudienceClient",
    "ResendEmailSender",
    "render_template",
    "StubAudienceClient",
    "StubEmailSender",
]
