"""Adobe Sign webhook event names this service acts on.

Adobe Sign sends many more event types (AGREEMENT_CREATED,
AGREEMENT_ACTION_COMPLETED, ...). Anything not listed here is acknowledged
without processing, so this enum is deliberately small.
"""

from enum import Enum


class AgreementEvent(str, Enum):
    """Terminal-outcome agreement events."""

    WORKFLOW_COMPLETED = "AGREEMENT_WORKFLOW_COMPLETED"
    RECALLED = "AGREEMENT_RECALLED"
    EXPIRED = "AGREEMENT_EXPIRED"

    @classmethod
    def parse(cls, value: str) -> "AgreementEvent | None":
        """Return the matching member, or None for events we do not handle."""
        try:
            return cls(value)
        except ValueError:
            return None
