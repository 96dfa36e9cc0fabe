"""Speaker snapshot carried inside domain events.

Events embed everything a handler needs, so handlers never look a speaker
up again. The snapshot is a frozen copy of the fields the notification
integrations use.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Speaker:
    """Speaker as seen by event handlers.

    Attributes:
        id: Speaker document ID.
        name: Display name ("First Last").
        email: Contact address. None or empty when the speaker never gave one.
        slug: Public profile slug, used in links.
    """

    id: str
    name: str
    email: str | None = None
    slug: str | None = None

    @property
    def has_contact_address(self) -> bool:
        """True when the speaker can be emailed."""
        return bool(self.email and self.email.strip())

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0] if self.name else ""

    @property
    def last_name(self) -> str:
        return " ".join(self.name.split(" ")[1:]) if self.name else ""
