"""Wall-clock implementation of ClockProtocol."""

from datetime import UTC, datetime


class SystemClock:
    """Current UTC time in the document store's timestamp format.

    Example:
        >>> SystemClock().now()
        '2026-03-14T09:26:53.589Z'
    """

    def now(self) -> str:
        return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
