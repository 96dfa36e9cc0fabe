"""Adobe Sign webhook request and response schemas.

Pydantic schemas for the /webhooks/adobe-sign endpoint. Includes:
- Request schemas (provider → API), tolerant of extra fields
- Response schemas (API → provider)
- Schema-to-command conversion

Adobe Sign sends camelCase keys; fields are declared snake_case with aliases.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from src.application.commands import ProcessAgreementEvent, SignedDocument


# =============================================================================
# Request Schemas
# =============================================================================


class SignedDocumentInfo(BaseModel):
    """Signed PDF attached to AGREEMENT_WORKFLOW_COMPLETED callbacks.

    Attributes:
        document: Base64-encoded file content.
        mime_type: Content type (e.g., "application/pdf").
        name: Original filename.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    document: str | None = Field(None, description="Base64-encoded document")
    mime_type: str | None = Field(None, alias="mimeType", description="Content type")
    name: str | None = Field(None, description="Original filename")


class AgreementInfo(BaseModel):
    """Agreement block of a webhook notification.

    Attributes:
        id: Provider agreement ID (stored as signatureId on the contract).
        status: Provider-side agreement status, informational only.
        signed_document_info: Inline signed document, when not trimmed.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(None, description="Agreement ID")
    status: str | None = Field(None, description="Provider agreement status")
    signed_document_info: SignedDocumentInfo | None = Field(
        None, alias="signedDocumentInfo", description="Inline signed document"
    )


class AdobeSignWebhookPayload(BaseModel):
    """Adobe Sign webhook notification body.

    Only ``event`` is required. Unknown fields are kept and ignored.

    Attributes:
        event: Event name (e.g., "AGREEMENT_WORKFLOW_COMPLETED").
        webhook_id: Webhook registration ID.
        agreement: Agreement details.
        conditional_parameters_trimmed: Fields omitted because the
            notification exceeded the provider's size limit.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    event: StrictStr = Field(..., description="Webhook event name")
    webhook_id: str | None = Field(None, alias="webhookId")
    agreement: AgreementInfo | None = None
    conditional_parameters_trimmed: list[str] | None = Field(
        None, alias="conditionalParametersTrimmed"
    )

    @property
    def agreement_id(self) -> str | None:
        return self.agreement.id if self.agreement and self.agreement.id else None

    def to_command(self) -> ProcessAgreementEvent:
        """Build the ProcessAgreementEvent command.

        Raises:
            ValueError: Payload has no agreement ID.
        """
        agreement_id = self.agreement_id
        if agreement_id is None:
            raise ValueError("Webhook payload has no agreement ID")

        info = self.agreement.signed_document_info if self.agreement else None
        signed_document = (
            SignedDocument(
                document=info.document,
                mime_type=info.mime_type,
                name=info.name,
            )
            if info is not None and info.document
            else None
        )
        return ProcessAgreementEvent(
            event=self.event,
            agreement_id=agreement_id,
            signed_document=signed_document,
            trimmed_parameters=tuple(self.conditional_parameters_trimmed or ()),
        )


# =============================================================================
# Response Schemas
# =============================================================================


class WebhookAckResponse(BaseModel):
    """Acknowledgement echoing the client ID back to Adobe Sign."""

    model_config = ConfigDict(populate_by_name=True)

    x_adobe_sign_client_id: str = Field(..., alias="xAdobeSignClientId")


class WebhookErrorResponse(BaseModel):
    """Error body returned to the provider."""

    error: str = Field(..., examples=["Unauthorized"])
