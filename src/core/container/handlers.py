"""Command handler dependency factories.

Request-scoped handler instances built from app-scoped infrastructure.

Usage:
    handler: ProcessAgreementEventHandler = Depends(get_process_agreement_event_handler)
"""

from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import (
    get_clock,
    get_document_store,
    get_logger,
)

if TYPE_CHECKING:
    from src.application.commands.handlers import ProcessAgreementEventHandler


def get_process_agreement_event_handler() -> "ProcessAgreementEventHandler":
    """Get ProcessAgreementEvent handler (request-scoped).

    Returns:
        ProcessAgreementEventHandler wired to the document store and clock.
    """
    from src.application.commands.handlers import ProcessAgreementEventHandler

    return ProcessAgreementEventHandler(
        document_store=get_document_store(),
        clock=get_clock(),
        logger=get_logger(),
        system_user_id=get_settings().system_user_id,
    )
