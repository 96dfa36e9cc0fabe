"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import AdobeSignWebhookPayload
"""

from src.schemas.webhook_schemas import (
    AdobeSignWebhookPayload,
    AgreementInfo,
    SignedDocumentInfo,
    WebhookAckResponse,
    WebhookErrorResponse,
)

__all__ = [
    "AdobeSignWebhookPayload",
    "AgreementInfo",
    "SignedDocumentInfo",
    "WebhookAckResponse",
    "WebhookErrorResponse",
]
