"""Domain value objects.

Immutable value objects embedded in domain events and used to validate
addresses before they leave the process.
"""

from src.domain.value_objects.email import Email
from src.domain.value_objects.snapshots import (
    ConferenceSnapshot,
    GalleryImageSnapshot,
    ProposalSnapshot,
    TriggeredBy,
)
from src.domain.value_objects.speaker import Speaker

__all__ = [
    "ConferenceSnapshot",
    "Email",
    "GalleryImageSnapshot",
    "ProposalSnapshot",
    "Speaker",
    "TriggeredBy",
]
