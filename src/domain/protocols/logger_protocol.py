"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the codebase while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(key-value context) and safe (no secrets).

Log Levels (standard 5-level hierarchy):
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events
    - WARNING: Degraded service, approaching limits
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure, immediate attention

Context Binding:
    Use bind() or with_context() to create request-scoped loggers with
    permanent context (trace_id, agreement_id) automatically included in all logs.

Security:
    - NEVER log API tokens, webhook client IDs or document contents
    - Sanitize user input (truncate, strip control characters)

Usage:
    from src.core.container import get_logger
    from src.domain.protocols.logger_protocol import LoggerProtocol

    # Basic logging
    logger: LoggerProtocol = get_logger()
    logger.info("agreement_signature_status_updated", agreement_id=agreement_id)

    # Request-scoped logging with bind()
    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("webhook_received")  # trace_id auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: a snake_case event message plus
    key-value context. Handler failures are logged with ``exc_info`` set to
    the exception so adapters can render the traceback.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message (diagnostics, e.g. event_publishing)."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message (normal operation)."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Used for isolated failures the system recovers from, such as one
        event handler failing or a webhook payload without its document.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event message.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (service cannot operate)."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            webhook_logger = logger.bind(agreement_id=agreement_id)
            webhook_logger.info("agreement_event_received")
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
