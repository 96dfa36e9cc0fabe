"""ClockProtocol - Injectable time source."""

from typing import Protocol


class ClockProtocol(Protocol):
    """Current time as an ISO-8601 UTC string."""

    def now(self) -> str:
        ...
