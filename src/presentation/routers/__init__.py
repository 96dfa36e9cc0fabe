"""External-facing routers (non-versioned endpoints).

Webhook paths are dictated by what is registered with the provider, not by
an API versioning strategy.
"""

from src.presentation.routers.adobe_sign_webhooks import adobe_sign_router
from src.presentation.routers.system import system_router

__all__ = ["adobe_sign_router", "system_router"]
