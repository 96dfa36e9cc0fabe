"""RFC 9457 error responses for unhandled exceptions."""

from src.presentation.errors.exception_handlers import register_exception_handlers
from src.presentation.errors.problem_details import ProblemDetails

__all__ = ["ProblemDetails", "register_exception_handlers"]
