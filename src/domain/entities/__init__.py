"""Domain entities."""

from src.domain.entities.sponsor_for_conference import (
    SignatureTransition,
    SponsorForConference,
    TransitionKind,
    document_reference,
    file_reference,
    resolve_signature_transition,
)

__all__ = [
    "SignatureTransition",
    "SponsorForConference",
    "TransitionKind",
    "document_reference",
    "file_reference",
    "resolve_signature_transition",
]
