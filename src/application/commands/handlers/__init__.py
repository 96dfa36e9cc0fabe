"""Command handlers."""

from src.application.commands.handlers.process_agreement_event_handler import (
    AgreementEventOutcome,
    AgreementEventResult,
    ProcessAgreementEventHandler,
)

__all__ = [
    "AgreementEventOutcome",
    "AgreementEventResult",
    "ProcessAgreementEventHandler",
]
