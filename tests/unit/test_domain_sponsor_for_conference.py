"""Unit tests for the sponsor contract signature state machine.

Tests cover:
- Every (stored status, event) pair of the transition table
- Redelivery is a no-op, terminal statuses never regress
- Reading raw store documents (missing/unknown status → not-started)
- Agreement event name parsing
"""

import pytest

from src.domain.entities import (
    SponsorForConference,
    TransitionKind,
    document_reference,
    file_reference,
    resolve_signature_transition,
)
from src.domain.enums import AgreementEvent, SignatureStatus

COMPLETED = AgreementEvent.WORKFLOW_COMPLETED
RECALLED = AgreementEvent.RECALLED
EXPIRED = AgreementEvent.EXPIRED


@pytest.mark.unit
class TestResolveSignatureTransition:
    """Test the pure transition function."""

    @pytest.mark.parametrize(
        ("current", "event", "target"),
        [
            (SignatureStatus.PENDING, COMPLETED, SignatureStatus.SIGNED),
            (SignatureStatus.PENDING, RECALLED, SignatureStatus.REJECTED),
            (SignatureStatus.PENDING, EXPIRED, SignatureStatus.EXPIRED),
            (SignatureStatus.NOT_STARTED, COMPLETED, SignatureStatus.SIGNED),
            (SignatureStatus.NOT_STARTED, RECALLED, SignatureStatus.REJECTED),
            (SignatureStatus.NOT_STARTED, EXPIRED, SignatureStatus.EXPIRED),
        ],
    )
    def test_open_statuses_apply(self, current, event, target):
        # Act
        transition = resolve_signature_transition(current, event)

        # Assert
        assert transition.kind is TransitionKind.APPLY
        assert transition.should_apply is True
        assert transition.previous is current
        assert transition.target is target

    @pytest.mark.parametrize(
        ("current", "event"),
        [
            (SignatureStatus.SIGNED, COMPLETED),
            (SignatureStatus.REJECTED, RECALLED),
            (SignatureStatus.EXPIRED, EXPIRED),
        ],
    )
    def test_redelivery_is_already_applied(self, current, event):
        # Act
        transition = resolve_signature_transition(current, event)

        # Assert
        assert transition.kind is TransitionKind.ALREADY_APPLIED
        assert transition.should_apply is False

    @pytest.mark.parametrize(
        ("current", "event"),
        [
            (SignatureStatus.SIGNED, RECALLED),
            (SignatureStatus.SIGNED, EXPIRED),
            (SignatureStatus.REJECTED, COMPLETED),
            (SignatureStatus.REJECTED, EXPIRED),
            (SignatureStatus.EXPIRED, COMPLETED),
            (SignatureStatus.EXPIRED, RECALLED),
        ],
    )
    def test_terminal_status_never_regresses(self, current, event):
        # Act
        transition = resolve_signature_transition(current, event)

        # Assert
        assert transition.kind is TransitionKind.IGNORED_TERMINAL
        assert transition.should_apply is False
        assert transition.previous is current

    def test_terminal_flags(self):
        assert not SignatureStatus.PENDING.is_terminal
        assert not SignatureStatus.NOT_STARTED.is_terminal
        assert SignatureStatus.SIGNED.is_terminal
        assert SignatureStatus.REJECTED.is_terminal
        assert SignatureStatus.EXPIRED.is_terminal


@pytest.mark.unit
class TestSponsorForConferenceFromDocument:
    """Test building the record from a raw store document."""

    def test_reads_contract_fields(self):
        # Arrange
        document = {
            "_id": "sfc-1",
            "signatureStatus": "signed",
            "contractStatus": "contract-signed",
            "contractSignedAt": "2026-03-01T10:00:00.000Z",
            "contractDocument": file_reference("file-abc-pdf"),
        }

        # Act
        record = SponsorForConference.from_document(document)

        # Assert
        assert record.id == "sfc-1"
        assert record.signature_status is SignatureStatus.SIGNED
        assert record.contract_status == "contract-signed"
        assert record.contract_signed_at == "2026-03-01T10:00:00.000Z"
        assert record.contract_document_asset_id == "file-abc-pdf"

    @pytest.mark.parametrize("raw_status", [None, "", "something-new"])
    def test_missing_or_unknown_status_reads_as_not_started(self, raw_status):
        # Act
        record = SponsorForConference.from_document(
            {"_id": "sfc-1", "signatureStatus": raw_status}
        )

        # Assert
        assert record.signature_status is SignatureStatus.NOT_STARTED
        assert record.transition_for(COMPLETED).should_apply is True

    def test_references(self):
        assert document_reference("user-1") == {"_type": "reference", "_ref": "user-1"}
        assert file_reference("file-1") == {
            "_type": "file",
            "asset": {"_type": "reference", "_ref": "file-1"},
        }


@pytest.mark.unit
class TestAgreementEventParse:
    """Test provider event name parsing."""

    def test_known_events(self):
        assert AgreementEvent.parse("AGREEMENT_WORKFLOW_COMPLETED") is COMPLETED
        assert AgreementEvent.parse("AGREEMENT_RECALLED") is RECALLED
        assert AgreementEvent.parse("AGREEMENT_EXPIRED") is EXPIRED

    @pytest.mark.parametrize(
        "name", ["AGREEMENT_CREATED", "AGREEMENT_ACTION_COMPLETED", "", "agreement_recalled"]
    )
    def test_unknown_events_return_none(self, name):
        assert AgreementEvent.parse(name) is None
