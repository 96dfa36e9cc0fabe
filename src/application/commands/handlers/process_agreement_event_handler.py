"""Process Agreement Event handler for contract signing.

Flow:
1. Parse event name; unrecognized events are acknowledged untouched
2. Look up the contract record by agreement ID
3. Resolve the signature transition (redelivery and regression are no-ops)
4. For completed agreements, decode and upload the signed PDF
5. Commit every field change in a single patch
6. Write a best-effort activity log entry
7. Return Success(AgreementEventResult)

Any document store failure in steps 2-5 returns Failure, so the webhook
answers 500 and the provider redelivers; the record is still unchanged at
that point. Step 6 failing is logged and does not fail the request.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, enums)
- NO infrastructure imports (store, clock and logger are injected via protocols)
"""

import base64
import binascii
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.application.commands.agreement_commands import (
    ProcessAgreementEvent,
    SignedDocument,
)
from src.core.constants import (
    SIGNED_DOCUMENT_DEFAULT_MIME_TYPE,
    SIGNED_DOCUMENT_TRIMMED_PARAMETER,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, UpstreamDependencyError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import (
    SignatureTransition,
    SponsorForConference,
    TransitionKind,
    document_reference,
    file_reference,
)
from src.domain.enums import (
    AgreementEvent,
    ContractStatus,
    SignatureStatus,
    SponsorActivityType,
)
from src.domain.protocols import ClockProtocol, DocumentStoreProtocol, LoggerProtocol

SPONSOR_BY_AGREEMENT_QUERY = (
    '*[_type == "sponsorForConference" && signatureId == $agreementId][0]'
    "{ _id, signatureStatus }"
)


class AgreementEventOutcome(str, Enum):
    """What processing an agreement event did."""

    UNHANDLED_EVENT = "unhandled_event"
    NOT_FOUND_IGNORED = "not_found_ignored"
    ALREADY_APPLIED = "already_applied"
    IGNORED_TERMINAL = "ignored_terminal"
    APPLIED = "applied"


@dataclass(frozen=True, slots=True, kw_only=True)
class AgreementEventResult:
    """Successful processing result.

    Attributes:
        outcome: What happened.
        sponsor_id: Contract record ID, when one was found.
        previous_status: Stored status before the event.
        new_status: Status after the event.
    """

    outcome: AgreementEventOutcome
    sponsor_id: str | None = None
    previous_status: SignatureStatus | None = None
    new_status: SignatureStatus | None = None


_NO_WRITE_OUTCOMES = {
    TransitionKind.ALREADY_APPLIED: AgreementEventOutcome.ALREADY_APPLIED,
    TransitionKind.IGNORED_TERMINAL: AgreementEventOutcome.IGNORED_TERMINAL,
}


class ProcessAgreementEventHandler:
    """Handler for ProcessAgreementEvent command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (state machine, protocols)
    - Infrastructure layer (Sanity store, clock via dependency injection)
    """

    def __init__(
        self,
        document_store: DocumentStoreProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
        system_user_id: str = "system",
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            document_store: Store holding contract records and activity log.
            clock: Time source for contractSignedAt and activity timestamps.
            logger: Structured logger.
            system_user_id: Document ID recorded as creator of activity entries.
        """
        self._store = document_store
        self._clock = clock
        self._logger = logger
        self._system_user_id = system_user_id

    async def handle(
        self, cmd: ProcessAgreementEvent
    ) -> Result[AgreementEventResult, DomainError]:
        """Handle one agreement callback.

        Args:
            cmd: ProcessAgreementEvent command.

        Returns:
            Success(AgreementEventResult) when the callback was handled,
                including every no-op outcome.
            Failure(UpstreamDependencyError) when the store failed.
            Failure(ValidationError) when the inline document is not base64.
        """
        event = AgreementEvent.parse(cmd.event)
        if event is None:
            self._logger.info(
                "agreement_event_unhandled",
                agreement_id=cmd.agreement_id,
                webhook_event=cmd.event,
            )
            return Success(
                value=AgreementEventResult(outcome=AgreementEventOutcome.UNHANDLED_EVENT)
            )

        try:
            document = await self._store.fetch_one(
                SPONSOR_BY_AGREEMENT_QUERY, {"agreementId": cmd.agreement_id}
            )
        except Exception as e:
            return self._upstream_failure("fetch_contract", cmd, e)

        if document is None:
            self._logger.warning(
                "agreement_contract_not_found",
                agreement_id=cmd.agreement_id,
                webhook_event=cmd.event,
            )
            return Success(
                value=AgreementEventResult(outcome=AgreementEventOutcome.NOT_FOUND_IGNORED)
            )

        record = SponsorForConference.from_document(document)
        transition = record.transition_for(event)

        if not transition.should_apply:
            return Success(value=self._skip(record, transition, cmd))

        now = self._clock.now()
        fields: dict[str, Any] = {"signatureStatus": transition.target.value}

        if event is AgreementEvent.WORKFLOW_COMPLETED:
            fields["contractStatus"] = ContractStatus.CONTRACT_SIGNED.value
            fields["contractSignedAt"] = now

            asset_result = await self._ingest_signed_document(cmd)
            match asset_result:
                case Failure():
                    return asset_result
                case Success(value=asset_id) if asset_id:
                    fields["contractDocument"] = file_reference(asset_id)

        try:
            await self._store.patch(record.id).set(fields).commit()
        except Exception as e:
            return self._upstream_failure("commit_contract", cmd, e)

        self._logger.info(
            "agreement_signature_status_updated",
            agreement_id=cmd.agreement_id,
            sponsor_id=record.id,
            previous_status=transition.previous.value,
            new_status=transition.target.value,
            contract_document_attached="contractDocument" in fields,
        )

        await self._log_activity(record.id, transition, now)

        return Success(
            value=AgreementEventResult(
                outcome=AgreementEventOutcome.APPLIED,
                sponsor_id=record.id,
                previous_status=transition.previous,
                new_status=transition.target,
            )
        )

    def _skip(
        self,
        record: SponsorForConference,
        transition: SignatureTransition,
        cmd: ProcessAgreementEvent,
    ) -> AgreementEventResult:
        context = {
            "agreement_id": cmd.agreement_id,
            "sponsor_id": record.id,
            "current_status": transition.previous.value,
            "requested_status": transition.target.value,
        }
        if transition.kind is TransitionKind.IGNORED_TERMINAL:
            self._logger.warning("agreement_event_conflicts_with_terminal_status", **context)
        else:
            self._logger.info("agreement_event_already_applied", **context)

        return AgreementEventResult(
            outcome=_NO_WRITE_OUTCOMES[transition.kind],
            sponsor_id=record.id,
            previous_status=transition.previous,
            new_status=transition.previous,
        )

    async def _ingest_signed_document(
        self, cmd: ProcessAgreementEvent
    ) -> Result[str | None, DomainError]:
        """Upload the inline signed PDF.

        Returns:
            Success(asset_id) after upload, Success(None) when the payload
            carries no document, Failure on decode or upload error.
        """
        signed = cmd.signed_document
        if signed is None or not signed.document:
            if SIGNED_DOCUMENT_TRIMMED_PARAMETER in cmd.trimmed_parameters:
                self._logger.warning(
                    "signed_document_trimmed",
                    agreement_id=cmd.agreement_id,
                    detail=f"Signed document for agreement {cmd.agreement_id} "
                    "was trimmed from payload; storing status only",
                )
            else:
                self._logger.warning(
                    "signed_document_missing",
                    agreement_id=cmd.agreement_id,
                )
            return Success(value=None)

        # MIME-style base64 is wrapped at 76 columns
        encoded = "".join(signed.document.split())
        try:
            data = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            self._logger.error(
                "signed_document_decode_failed",
                error=e,
                agreement_id=cmd.agreement_id,
            )
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_SIGNED_DOCUMENT,
                    message="Signed document is not valid base64",
                    field="agreement.signedDocumentInfo.document",
                    details={"agreement_id": cmd.agreement_id},
                )
            )

        try:
            asset = await self._store.assets.upload(
                "file",
                data,
                filename=self._filename(signed, cmd.agreement_id),
                content_type=signed.mime_type or SIGNED_DOCUMENT_DEFAULT_MIME_TYPE,
            )
        except Exception as e:
            return self._upstream_failure(
                "upload_signed_document", cmd, e, code=ErrorCode.ASSET_UPLOAD_FAILED
            )

        return Success(value=asset["_id"])

    @staticmethod
    def _filename(signed: SignedDocument, agreement_id: str) -> str:
        return signed.name or f"signed-contract-{agreement_id}.pdf"

    async def _log_activity(
        self,
        sponsor_id: str,
        transition: SignatureTransition,
        timestamp: str,
    ) -> None:
        old_value = transition.previous.value
        new_value = transition.target.value
        try:
            await self._store.create(
                {
                    "_type": "sponsorActivity",
                    "sponsorForConference": document_reference(sponsor_id),
                    "activityType": SponsorActivityType.SIGNATURE_STATUS_CHANGE.value,
                    "description": (
                        f"Signature status changed from {old_value} to {new_value}"
                        " (via Adobe Sign webhook)"
                    ),
                    "metadata": {
                        "oldValue": old_value,
                        "newValue": new_value,
                        "timestamp": timestamp,
                    },
                    "createdBy": document_reference(self._system_user_id),
                    "createdAt": timestamp,
                }
            )
        except Exception as e:
            self._logger.error(
                "signature_activity_log_failed",
                error=e,
                sponsor_id=sponsor_id,
                new_status=new_value,
            )

    def _upstream_failure(
        self,
        operation: str,
        cmd: ProcessAgreementEvent,
        error: Exception,
        *,
        code: ErrorCode = ErrorCode.DOCUMENT_STORE_UNAVAILABLE,
    ) -> Failure[UpstreamDependencyError]:
        self._logger.error(
            "agreement_event_processing_failed",
            error=error,
            operation=operation,
            agreement_id=cmd.agreement_id,
            webhook_event=cmd.event,
        )
        return Failure(
            error=UpstreamDependencyError(
                code=code,
                message=f"Document store failed during {operation}",
                dependency="document_store",
                details={"agreement_id": cmd.agreement_id, "operation": operation},
            )
        )
