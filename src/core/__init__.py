"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Settings and constants

The core module has NO dependencies on other application layers
(the container subpackage is the composition root and is the one exception).
"""

from src.core.errors import (
    AuthenticationError,
    DomainError,
    UpstreamDependencyError,
    ValidationError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "UpstreamDependencyError",
    "ValidationError",
]
