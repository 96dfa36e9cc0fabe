"""EmailSenderProtocol - Port for transactional email.

Handlers name a template and pass its data; the adapter renders and sends.
This is a Protocol (not ABC) for structural typing.
"""

from typing import Any, Protocol


class EmailSenderProtocol(Protocol):
    """Send one templated email.

    Example:
        >>> await email_sender.send(
        ...     to="speaker@example.com",
        ...     template="proposal_accepted",
        ...     data={"speaker_name": "Ada", "proposal_title": "eBPF"},
        ... )
    """

    async def send(self, to: str, template: str, data: dict[str, Any]) -> None:
        """Send the rendered template to one recipient.

        Raises:
            EmailDeliveryError: Transport or API failure.
            KeyError: Unknown template.
        """
        ...
