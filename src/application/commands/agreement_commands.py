"""Agreement commands (CQRS write operations).

Commands represent intent to change contract state. All commands are
immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class SignedDocument:
    """Signed PDF inlined in a webhook payload.

    Attributes:
        document: Base64-encoded file content.
        mime_type: Content type reported by the provider.
        name: Original filename reported by the provider.
    """

    document: str
    mime_type: str | None = None
    name: str | None = None


@dataclass(frozen=True, kw_only=True)
class ProcessAgreementEvent:
    """Apply one e-signature provider callback to its contract record.

    Attributes:
        event: Provider event name (e.g., "AGREEMENT_WORKFLOW_COMPLETED").
        agreement_id: Provider agreement ID stored as ``signatureId``.
        signed_document: Inline signed PDF, when the provider sent it.
        trimmed_parameters: Payload fields the provider omitted for size.

    Example:
        >>> command = ProcessAgreementEvent(
        ...     event="AGREEMENT_RECALLED",
        ...     agreement_id="CBJCHBCAABAA...",
        ... )
        >>> result = await handler.handle(command)
    """

    event: str
    agreement_id: str
    signed_document: SignedDocument | None = None
    trimmed_parameters: tuple[str, ...] = ()
