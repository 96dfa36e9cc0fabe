"""Commands - Write operations that change state.

Commands represent intent to perform an action. They are immutable
dataclasses with imperative names (ProcessAgreementEvent).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.agreement_commands import (
    ProcessAgreementEvent,
    SignedDocument,
)

__all__ = [
    "ProcessAgreementEvent",
    "SignedDocument",
]
