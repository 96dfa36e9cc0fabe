"""Common error classes used across all domains and layers.

These are generic errors that don't belong to any specific domain.
They are used throughout the application for common failure scenarios.

Error Types:
- ValidationError: Input validation failures (malformed webhook body)
- AuthenticationError: Webhook client ID missing or mismatched
- UpstreamDependencyError: Document store, asset store or transport failure

Usage:
    from src.core.errors import ValidationError, UpstreamDependencyError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_WEBHOOK_PAYLOAD,
        message="Webhook body must be a JSON object",
        field="event",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (missing or mismatched webhook client ID).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message. Never contains the expected secret.
        details: Additional context.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamDependencyError(DomainError):
    """Failure calling an external collaborator.

    Covers the document store, the asset store and outbound transports.
    Webhook processing maps this to HTTP 500 so the provider retries.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        dependency: Name of the failing collaborator (e.g., "document_store").
        details: Additional context.
    """

    dependency: str
