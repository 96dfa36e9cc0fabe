"""Domain enums.

Usage:
    from src.domain.enums import ProposalAction, SignatureStatus
"""

from src.domain.enums.agreement_event import AgreementEvent
from src.domain.enums.proposal_status import ProposalAction, ProposalStatus
from src.domain.enums.signature_status import (
    ContractStatus,
    SignatureStatus,
    SponsorActivityType,
)

__all__ = [
    "AgreementEvent",
    "ContractStatus",
    "ProposalAction",
    "ProposalStatus",
    "SignatureStatus",
    "SponsorActivityType",
]
