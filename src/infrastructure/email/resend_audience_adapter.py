"""Resend adapter for AudienceProtocol.

Endpoints used:
    - GET    /audiences
    - POST   /audiences
    - GET    /audiences/{audience_id}/contacts
    - POST   /audiences/{audience_id}/contacts
    - DELETE /audiences/{audience_id}/contacts/{contact_id}
"""

from typing import Any

import httpx

from src.core.constants import HTTP_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.domain.protocols import AudienceContact
from src.infrastructure.errors import AudienceError
from src.infrastructure.http import BaseHTTPClient


def _data_list(body: Any) -> list[dict[str, Any]]:
    if not isinstance(body, dict):
        return []
    data = body.get("data")
    return [item for item in data if isinstance(item, dict)] if isinstance(data, list) else []


class ResendAudienceClient(BaseHTTPClient):
    """Manage Resend audiences and their contacts."""

    error_class = AudienceError
    error_code = ErrorCode.AUDIENCE_SYNC_FAILED

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str = "https://api.resend.com",
        timeout: float = HTTP_TIMEOUT_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            service_name="resend",
            timeout=timeout,
            transport=transport,
        )
        self._api_key = api_key

    def _default_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key or ''}"}

    async def get_or_create_audience(self, name: str) -> str:
        body = await self._request_json(
            method="GET", path="/audiences", operation="list_audiences"
        )
        for audience in _data_list(body):
            if audience.get("name") == name:
                return str(audience["id"])

        created = await self._request_json(
            method="POST",
            path="/audiences",
            json_data={"name": name},
            operation="create_audience",
        )
        self._logger.info("resend_audience_created", audience_name=name)
        return str(created["id"])

    async def add_contact(self, audience_id: str, contact: AudienceContact) -> None:
        try:
            await self._request_json(
                method="POST",
                path=f"/audiences/{audience_id}/contacts",
                json_data={
                    "email": contact.email,
                    "first_name": contact.first_name,
                    "last_name": contact.last_name,
                    "unsubscribed": False,
                },
                operation="add_contact",
            )
        except AudienceError as e:
            body = (e.error.details or {}).get("response_body", "")
            if "already exists" in body:
                return
            raise

    async def remove_contact(self, audience_id: str, email: str) -> None:
        body = await self._request_json(
            method="GET",
            path=f"/audiences/{audience_id}/contacts",
            operation="list_contacts",
        )
        contact = next(
            (c for c in _data_list(body) if c.get("email") == email),
            None,
        )
        if contact is None:
            return

        await self._request_json(
            method="DELETE",
            path=f"/audiences/{audience_id}/contacts/{contact['id']}",
            operation="remove_contact",
        )
