"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (document store,
email provider, chat webhook).

Architecture:
- Error *data* is a DomainError dataclass (ExternalServiceError)
- HTTP adapters raise an IntegrationError exception carrying that data, since
  event handlers let failures propagate to the event bus
- The application boundary (ProcessAgreementEventHandler) catches
  IntegrationError and returns Failure(UpstreamDependencyError)
"""

from dataclasses import dataclass

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Infrastructure errors still use domain ErrorCode enum (not InfrastructureErrorCode).
    The InfrastructureErrorCode is for internal infrastructure tracking only.

    Attributes:
        code: Domain ErrorCode (maps from InfrastructureErrorCode).
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalServiceError(InfrastructureError):
    """External service integration errors.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Service-specific error code.
        service_name: Name of the external service.
        details: Additional context (status code, response).
    """

    service_name: str


class IntegrationError(Exception):
    """Raised by HTTP adapters when an external call fails.

    Attributes:
        error: Structured error data.
    """

    def __init__(self, error: ExternalServiceError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def service_name(self) -> str:
        return self.error.service_name


class DocumentStoreError(IntegrationError):
    """Document store query, mutation or asset upload failed."""


class EmailDeliveryError(IntegrationError):
    """Transactional email could not be sent."""


class AudienceError(IntegrationError):
    """Mailing-list audience operation failed."""


class ChatDeliveryError(IntegrationError):
    """Chat message could not be posted."""
