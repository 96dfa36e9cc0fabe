"""Infrastructure-specific error codes.

These are internal codes for tracking infrastructure failures.
They are mapped to domain ErrorCode when flowing to domain layer.

Categories:
- External service errors (EXTERNAL_SERVICE_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes.

    These are internal codes for tracking infrastructure failures.
    They are mapped to domain ErrorCode when flowing to domain layer.
    """

    EXTERNAL_SERVICE_UNAVAILABLE = "external_service_unavailable"
    EXTERNAL_SERVICE_TIMEOUT = "external_service_timeout"
    EXTERNAL_SERVICE_ERROR = "external_service_error"
    EXTERNAL_SERVICE_INVALID_RESPONSE = "external_service_invalid_response"
