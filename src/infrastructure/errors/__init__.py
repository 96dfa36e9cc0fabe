"""Infrastructure errors package.

Exports infrastructure-level error classes for convenient importing.

Usage:
    from src.infrastructure.errors import DocumentStoreError, IntegrationError
"""

from src.infrastructure.errors.infrastructure_error import (
    AudienceError,
    ChatDeliveryError,
    DocumentStoreError,
    EmailDeliveryError,
    ExternalServiceError,
    InfrastructureError,
    IntegrationError,
)

__all__ = [
    "InfrastructureError",
    "ExternalServiceError",
    "IntegrationError",
    "DocumentStoreError",
    "EmailDeliveryError",
    "AudienceError",
    "ChatDeliveryError",
]
