"""RFC 9457 Problem Details for HTTP APIs.

Used for framework-level failures (unknown routes, unhandled exceptions).
The webhook endpoint itself answers with the flat ``{"error": ...}`` bodies
Adobe Sign expects.

Exports:
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="https://cloudnativedays.no/errors/not-found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Not Found",
        ...     instance="/webhooks/unknown",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="URI reference identifying this occurrence")
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
