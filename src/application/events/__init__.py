"""Domain event publishers.

Thin functions that build an event from use-case data and hand it to the
event bus. Callers publish only after their own state change is persisted.
"""

from src.application.events.publishers import (
    publish_proposal_status_changed,
    publish_speaker_tagged,
)

__all__ = [
    "publish_proposal_status_changed",
    "publish_speaker_tagged",
]
