"""Sponsor-for-conference contract record and its signature state machine.

Only the contract/signature subset of the CRM document is modelled here.
The record is owned by the document store; this service mutates it
exclusively through the Adobe Sign webhook.

State machine (per agreement):

    pending/not-started --(AGREEMENT_WORKFLOW_COMPLETED)--> signed
    pending/not-started --(AGREEMENT_RECALLED)-----------> rejected
    pending/not-started --(AGREEMENT_EXPIRED)------------> expired
    X --(event targeting X)--> unchanged          (redelivery)
    terminal --(other terminal event)--> unchanged (no regression)

Transitions are a pure function of (stored status, incoming event) so a
redelivered webhook can be applied any number of times.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.domain.enums import AgreementEvent, SignatureStatus

_EVENT_TARGETS: dict[AgreementEvent, SignatureStatus] = {
    AgreementEvent.WORKFLOW_COMPLETED: SignatureStatus.SIGNED,
    AgreementEvent.RECALLED: SignatureStatus.REJECTED,
    AgreementEvent.EXPIRED: SignatureStatus.EXPIRED,
}


class TransitionKind(str, Enum):
    """How an incoming agreement event relates to the stored status."""

    APPLY = "apply"
    ALREADY_APPLIED = "already_applied"
    IGNORED_TERMINAL = "ignored_terminal"


@dataclass(frozen=True, slots=True, kw_only=True)
class SignatureTransition:
    """Decision for one agreement event.

    Attributes:
        kind: Whether to write, or why nothing is written.
        previous: Stored status before the event.
        target: Status the event asks for.
    """

    kind: TransitionKind
    previous: SignatureStatus
    target: SignatureStatus

    @property
    def should_apply(self) -> bool:
        return self.kind is TransitionKind.APPLY


def resolve_signature_transition(
    current: SignatureStatus,
    event: AgreementEvent,
) -> SignatureTransition:
    """Decide what an agreement event does to a stored signature status.

    Args:
        current: Status currently stored on the record.
        event: Terminal agreement event received from the provider.

    Returns:
        SignatureTransition describing the write (or the reason for none).
    """
    target = _EVENT_TARGETS[event]
    if current == target:
        kind = TransitionKind.ALREADY_APPLIED
    elif current.is_terminal:
        kind = TransitionKind.IGNORED_TERMINAL
    else:
        kind = TransitionKind.APPLY
    return SignatureTransition(kind=kind, previous=current, target=target)


@dataclass(frozen=True, slots=True, kw_only=True)
class SponsorForConference:
    """Contract record for one sponsor at one conference.

    Attributes:
        id: Document ID.
        signature_status: Agreement signing outcome.
        contract_status: CRM contract pipeline status (raw string, the CRM
            owns more values than this service writes).
        contract_signed_at: ISO timestamp set on transition to signed.
        contract_document_asset_id: Asset ID of the stored signed PDF.
    """

    id: str
    signature_status: SignatureStatus = SignatureStatus.NOT_STARTED
    contract_status: str | None = None
    contract_signed_at: str | None = None
    contract_document_asset_id: str | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "SponsorForConference":
        """Build the record from a raw store document.

        Unknown or missing signature statuses are read as NOT_STARTED, which
        the state machine treats like pending.

        Args:
            document: Document as returned by the store (Sanity field names).

        Returns:
            SponsorForConference snapshot.
        """
        raw_status = document.get("signatureStatus")
        try:
            status = SignatureStatus(raw_status) if raw_status else SignatureStatus.NOT_STARTED
        except ValueError:
            status = SignatureStatus.NOT_STARTED

        asset_ref = (document.get("contractDocument") or {}).get("asset") or {}
        return cls(
            id=document["_id"],
            signature_status=status,
            contract_status=document.get("contractStatus"),
            contract_signed_at=document.get("contractSignedAt"),
            contract_document_asset_id=asset_ref.get("_ref"),
        )

    def transition_for(self, event: AgreementEvent) -> SignatureTransition:
        """Resolve the transition an agreement event causes on this record."""
        return resolve_signature_transition(self.signature_status, event)


def file_reference(asset_id: str) -> dict[str, Any]:
    """Typed file field pointing at an uploaded asset."""
    return {"_type": "file", "asset": {"_type": "reference", "_ref": asset_id}}


def document_reference(document_id: str) -> dict[str, str]:
    """Typed reference to another document."""
    return {"_type": "reference", "_ref": document_id}
