"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Timeouts: Default timeouts for external service calls
- Batching: Default concurrency limits for outbound notifications
- Webhook protocol: Header and payload names dictated by Adobe Sign
- Limits: Truncation and safety limits
"""

# =============================================================================
# Timeouts
# =============================================================================

HTTP_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for outbound HTTP calls (seconds)."""


# =============================================================================
# Batching
# =============================================================================

GALLERY_NOTIFICATION_BATCH_SIZE_DEFAULT: int = 5
"""Max gallery tag emails sent concurrently (Resend allows a few requests/second)."""


# =============================================================================
# Adobe Sign Webhook Protocol
# =============================================================================

ADOBE_SIGN_CLIENT_ID_HEADER: str = "X-AdobeSign-ClientId"
"""Request/response header carrying the webhook client ID."""

ADOBE_SIGN_CLIENT_ID_BODY_KEY: str = "xAdobeSignClientId"
"""JSON body key used to echo the client ID back to Adobe Sign."""

SIGNED_DOCUMENT_TRIMMED_PARAMETER: str = "agreement.signedDocumentInfo"
"""Entry in conditionalParametersTrimmed when the signed PDF was omitted."""

SIGNED_DOCUMENT_DEFAULT_MIME_TYPE: str = "application/pdf"
"""Content type used when the payload carries no mimeType."""


# =============================================================================
# Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length of response body to include in error logs."""
