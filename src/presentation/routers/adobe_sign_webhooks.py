"""Adobe Sign webhook router for contract signature callbacks.

Receives agreement lifecycle notifications from Adobe Sign. The endpoint
path is registered with the provider, so it is not part of a versioned API.

Protocol:
    GET  /webhooks/adobe-sign  Verification of intent. Adobe Sign sends its
                               client ID in X-AdobeSign-ClientId and expects
                               it echoed in the same header and in the body.
    POST /webhooks/adobe-sign  Event notification, same echo on success.

Adobe Sign retries any non-2xx response, so only store failures answer 500.
Unknown events, unknown agreements and repeated deliveries answer 200.

Security:
    - Client ID compared in constant time against ADOBE_SIGN_CLIENT_ID
    - An unset ADOBE_SIGN_CLIENT_ID rejects every request
    - Error bodies never contain the expected client ID
"""

import hmac
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from src.application.commands.handlers import ProcessAgreementEventHandler
from src.core.config import Settings, get_settings
from src.core.constants import (
    ADOBE_SIGN_CLIENT_ID_BODY_KEY,
    ADOBE_SIGN_CLIENT_ID_HEADER,
)
from src.core.container import get_logger, get_process_agreement_event_handler
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol
from src.schemas import (
    AdobeSignWebhookPayload,
    WebhookAckResponse,
    WebhookErrorResponse,
)

adobe_sign_router = APIRouter(prefix="/webhooks", tags=["Webhooks"])

_ACK = {"model": WebhookAckResponse, "description": "Client ID echoed"}
_ERROR = {"model": WebhookErrorResponse}


def authenticate_client_id(
    client_id: str | None,
    expected: str | None,
) -> Result[str, AuthenticationError]:
    """Check the X-AdobeSign-ClientId header value.

    Args:
        client_id: Header value from the request.
        expected: Configured client ID (None when unset).

    Returns:
        Success(client_id) when it matches.
        Failure(AuthenticationError) when missing, mismatched or unconfigured.
    """
    if not expected:
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.WEBHOOK_NOT_CONFIGURED,
                message="Webhook client ID is not configured",
            )
        )
    if not client_id:
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.WEBHOOK_CLIENT_ID_MISSING,
                message="Missing client ID header",
            )
        )
    if not hmac.compare_digest(client_id.encode(), expected.encode()):
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.WEBHOOK_CLIENT_ID_MISMATCH,
                message="Client ID does not match",
            )
        )
    return Success(value=client_id)


def _respond(
    status_code: int,
    content: dict[str, Any],
    client_id: str | None = None,
) -> JSONResponse:
    headers = {ADOBE_SIGN_CLIENT_ID_HEADER: client_id} if client_id else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _acknowledge(client_id: str) -> JSONResponse:
    return _respond(
        status.HTTP_200_OK, {ADOBE_SIGN_CLIENT_ID_BODY_KEY: client_id}, client_id
    )


@adobe_sign_router.get(
    "/adobe-sign",
    responses={200: _ACK, 401: _ERROR},
)
async def verify_adobe_sign_webhook(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
) -> JSONResponse:
    """Answer Adobe Sign's verification-of-intent request.

    Returns:
        200 with the client ID echoed, or 401 {"error": "Invalid client ID"}.
    """
    auth = authenticate_client_id(
        request.headers.get(ADOBE_SIGN_CLIENT_ID_HEADER),
        settings.adobe_sign_client_id,
    )

    match auth:
        case Success(value=client_id):
            logger.info("adobe_sign_webhook_verified")
            return _acknowledge(client_id)
        case Failure(error=error):
            logger.warning("adobe_sign_webhook_rejected", reason=error.code.value)
            return _respond(status.HTTP_401_UNAUTHORIZED, {"error": "Invalid client ID"})


@adobe_sign_router.post(
    "/adobe-sign",
    responses={200: _ACK, 400: _ERROR, 401: _ERROR, 500: _ERROR},
)
async def receive_adobe_sign_event(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
    handler: Annotated[
        ProcessAgreementEventHandler, Depends(get_process_agreement_event_handler)
    ],
) -> JSONResponse:
    """Process an Adobe Sign event notification.

    Flow:
        1. Authenticate the client ID header (401 on failure)
        2. Parse JSON (400 "Invalid JSON") and validate shape
           (400 "Invalid webhook payload")
        3. Acknowledge payloads without an agreement ID
        4. Dispatch ProcessAgreementEvent (500 "Internal error" on Failure)

    Returns:
        JSONResponse with the client ID echoed on every post-auth response.
    """
    auth = authenticate_client_id(
        request.headers.get(ADOBE_SIGN_CLIENT_ID_HEADER),
        settings.adobe_sign_client_id,
    )
    if isinstance(auth, Failure):
        logger.warning("adobe_sign_webhook_rejected", reason=auth.error.code.value)
        return _respond(status.HTTP_401_UNAUTHORIZED, {"error": "Unauthorized"})
    client_id = auth.value

    try:
        body = await request.json()
    except ValueError:
        logger.warning("adobe_sign_webhook_invalid_json")
        return _respond(status.HTTP_400_BAD_REQUEST, {"error": "Invalid JSON"}, client_id)

    try:
        payload = AdobeSignWebhookPayload.model_validate(body)
    except PydanticValidationError as e:
        logger.warning(
            "adobe_sign_webhook_invalid_payload",
            error_code=ErrorCode.INVALID_WEBHOOK_PAYLOAD.value,
            error_count=e.error_count(),
        )
        return _respond(
            status.HTTP_400_BAD_REQUEST, {"error": "Invalid webhook payload"}, client_id
        )

    logger.info(
        "adobe_sign_webhook_received",
        webhook_event=payload.event,
        agreement_id=payload.agreement_id,
        webhook_id=payload.webhook_id,
    )

    if payload.agreement_id is None:
        return _acknowledge(client_id)

    result = await handler.handle(payload.to_command())

    match result:
        case Success(value=outcome):
            logger.info(
                "adobe_sign_webhook_processed",
                agreement_id=payload.agreement_id,
                outcome=outcome.outcome.value,
            )
            return _acknowledge(client_id)
        case Failure(error=error):
            logger.warning(
                "adobe_sign_webhook_failed",
                agreement_id=payload.agreement_id,
                error_code=error.code.value,
            )
            return _respond(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"error": "Internal error"},
                client_id,
            )
