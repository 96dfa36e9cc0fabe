"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*)
- Authentication errors (WEBHOOK_*)
- Upstream dependency errors (DOCUMENT_STORE_*, EMAIL_*, CHAT_*, AUDIENCE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_WEBHOOK_PAYLOAD = "invalid_webhook_payload"
    INVALID_SIGNED_DOCUMENT = "invalid_signed_document"

    # Authentication errors
    WEBHOOK_CLIENT_ID_MISSING = "webhook_client_id_missing"
    WEBHOOK_CLIENT_ID_MISMATCH = "webhook_client_id_mismatch"
    WEBHOOK_NOT_CONFIGURED = "webhook_not_configured"

    # Upstream dependency errors
    DOCUMENT_STORE_UNAVAILABLE = "document_store_unavailable"
    ASSET_UPLOAD_FAILED = "asset_upload_failed"
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"
    CHAT_DELIVERY_FAILED = "chat_delivery_failed"
    AUDIENCE_SYNC_FAILED = "audience_sync_failed"
