"""Contract signature enums for sponsor-for-conference records.

SignatureStatus tracks the e-signature outcome of the agreement sent to a
sponsor. NOT_STARTED is the value of records that never entered the signing
flow (the CRM stores no status at all for them).

ContractStatus is the broader CRM contract pipeline status; the webhook only
ever writes CONTRACT_SIGNED.
"""

from enum import Enum


class SignatureStatus(str, Enum):
    """Local signing outcome of one agreement.

    Moves only from PENDING (or NOT_STARTED) to one of the terminal values.
    """

    NOT_STARTED = "not-started"
    PENDING = "pending"
    SIGNED = "signed"
    REJECTED = "rejected"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        """True once the agreement reached a final outcome."""
        return self in _TERMINAL_STATUSES


_TERMINAL_STATUSES = frozenset(
    {SignatureStatus.SIGNED, SignatureStatus.REJECTED, SignatureStatus.EXPIRED}
)


class ContractStatus(str, Enum):
    """CRM contract pipeline status."""

    NONE = "none"
    VERBAL_AGREEMENT = "verbal-agreement"
    CONTRACT_SENT = "contract-sent"
    CONTRACT_SIGNED = "contract-signed"


class SponsorActivityType(str, Enum):
    """Activity log entry types written by this service."""

    SIGNATURE_STATUS_CHANGE = "signature_status_change"
