"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from src.core.errors import DomainError, ValidationError, UpstreamDependencyError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    UpstreamDependencyError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "AuthenticationError",
    "UpstreamDependencyError",
]
