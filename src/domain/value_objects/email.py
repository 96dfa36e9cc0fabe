"""Email value object with validation.

Immutable value object that validates email format.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses email-validator for RFC-compliant validation. Outbound adapters wrap
    recipient addresses in this before calling a transport, so a malformed
    speaker address fails locally instead of as an opaque 422 from the API.

    Attributes:
        value: The email address string (validated, normalized)

    Raises:
        ValueError: If email format is invalid

    Example:
        >>> str(Email("Speaker@Example.com"))
        'Speaker@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the address.

        Raises:
            ValueError: If email format is invalid.
        """
        try:
            validated = validate_email(self.value, check_deliverability=False)
            object.__setattr__(self, "value", validated.normalized)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e

    def __str__(self) -> str:
        return self.value
