"""AudienceProtocol - Port for mailing-list audiences.

An audience groups broadcast recipients by role (e.g., all confirmed
speakers of one conference).
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True, kw_only=True)
class AudienceContact:
    """Audience member.

    Attributes:
        email: Address (unique within an audience).
        first_name: Given name.
        last_name: Family name(s).
    """

    email: str
    first_name: str = ""
    last_name: str = ""


class AudienceProtocol(Protocol):
    """Mailing-list audience operations."""

    async def get_or_create_audience(self, name: str) -> str:
        """Return the ID of the audience with this name, creating it if absent."""
        ...

    async def add_contact(self, audience_id: str, contact: AudienceContact) -> None:
        """Add a contact; already-present contacts count as success."""
        ...

    async def remove_contact(self, audience_id: str, email: str) -> None:
        """Remove a contact by email; absent contacts count as success."""
        ...
