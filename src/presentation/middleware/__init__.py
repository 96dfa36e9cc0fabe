"""HTTP middleware."""

from src.presentation.middleware.trace_middleware import TRACE_ID_HEADER, TraceMiddleware

__all__ = ["TRACE_ID_HEADER", "TraceMiddleware"]
