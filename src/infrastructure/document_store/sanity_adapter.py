"""Sanity HTTP API adapter for DocumentStoreProtocol.

Endpoints used:
    - GET  /data/query/{dataset}    GROQ query, parameters as ``$name`` JSON values
    - POST /data/mutate/{dataset}   patch/create mutations (one transaction per call)
    - POST /assets/{files|images}/{dataset}  raw binary upload

Reference:
    - src/domain/protocols/document_store_protocol.py
"""

import json
from typing import Any

import httpx

from src.core.constants import HTTP_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import DocumentStoreError
from src.infrastructure.http import BaseHTTPClient

_ASSET_ENDPOINTS = {"file": "files", "image": "images"}


class _SanityClient(BaseHTTPClient):
    error_class = DocumentStoreError
    error_code = ErrorCode.DOCUMENT_STORE_UNAVAILABLE

    def __init__(
        self,
        *,
        base_url: str,
        dataset: str,
        token: str | None,
        timeout: float = HTTP_TIMEOUT_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            service_name="sanity",
            timeout=timeout,
            transport=transport,
        )
        self._dataset = dataset
        self._token = token

    def _default_headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    async def mutate(
        self, mutations: list[dict[str, Any]], *, operation: str
    ) -> dict[str, Any]:
        data = await self._request_json(
            method="POST",
            path=f"/data/mutate/{self._dataset}",
            params={"returnIds": "true", "returnDocuments": "true"},
            json_data={"mutations": mutations},
            operation=operation,
        )
        if not isinstance(data, dict):
            self._raise(
                "Expected object response from Sanity mutate",
                infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_INVALID_RESPONSE,
                operation=operation,
            )
        return data

    async def query(
        self, groq: str, params: dict[str, Any], *, operation: str
    ) -> Any:
        query_params = {"query": groq}
        for name, value in params.items():
            query_params[f"${name}"] = json.dumps(value)

        body = await self._request_json(
            method="GET",
            path=f"/data/query/{self._dataset}",
            params=query_params,
            operation=operation,
        )
        return body.get("result") if isinstance(body, dict) else None

    async def upload(
        self,
        endpoint: str,
        data: bytes,
        *,
        filename: str,
        content_type: str,
        operation: str,
    ) -> dict[str, Any]:
        body = await self._request_json(
            method="POST",
            path=f"/assets/{endpoint}/{self._dataset}",
            params={"filename": filename},
            headers={"Content-Type": content_type},
            content=data,
            operation=operation,
        )
        document = body.get("document") if isinstance(body, dict) else None
        if not isinstance(document, dict) or "_id" not in document:
            self._raise(
                "Sanity asset upload returned no asset document",
                infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_INVALID_RESPONSE,
                operation=operation,
            )
        return document


class SanityPatch:
    """Pending patch on one document.

    Fields from every ``set`` call are merged and sent as a single ``patch``
    mutation on ``commit``.
    """

    def __init__(self, client: _SanityClient, document_id: str) -> None:
        self._client = client
        self._document_id = document_id
        self._fields: dict[str, Any] = {}

    def set(self, fields: dict[str, Any]) -> "SanityPatch":
        self._fields.update(fields)
        return self

    async def commit(self) -> dict[str, Any]:
        return await self._client.mutate(
            [{"patch": {"id": self._document_id, "set": dict(self._fields)}}],
            operation="patch_document",
        )


class SanityAssetStore:
    """Binary asset upload endpoint."""

    def __init__(self, client: _SanityClient) -> None:
        self._client = client

    async def upload(
        self,
        kind: str,
        data: bytes,
        *,
        filename: str,
        content_type: str,
    ) -> dict[str, Any]:
        """Upload bytes and return the created asset document.

        Raises:
            ValueError: Unknown asset kind.
            DocumentStoreError: Upload failed or response has no asset ID.
        """
        endpoint = _ASSET_ENDPOINTS.get(kind)
        if endpoint is None:
            raise ValueError(f"Unsupported asset kind: {kind}")

        return await self._client.upload(
            endpoint,
            data,
            filename=filename,
            content_type=content_type,
            operation="upload_asset",
        )


class SanityDocumentStore:
    """DocumentStoreProtocol implementation over the Sanity HTTP API.

    Example:
        >>> store = SanityDocumentStore(
        ...     base_url=settings.sanity_api_base_url,
        ...     dataset=settings.sanity_dataset,
        ...     token=settings.sanity_api_token,
        ... )
        >>> doc = await store.fetch_one(query, {"agreementId": "CBJ..."})
        >>> await store.patch(doc["_id"]).set({"signatureStatus": "signed"}).commit()
    """

    def __init__(
        self,
        *,
        base_url: str,
        dataset: str,
        token: str | None,
        timeout: float = HTTP_TIMEOUT_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = _SanityClient(
            base_url=base_url,
            dataset=dataset,
            token=token,
            timeout=timeout,
            transport=transport,
        )
        self._assets = SanityAssetStore(self._client)

    @property
    def assets(self) -> SanityAssetStore:
        return self._assets

    async def fetch_one(
        self, query: str, params: dict[str, Any]
    ) -> dict[str, Any] | None:
        result = await self._client.query(query, params, operation="fetch_one")
        return result if isinstance(result, dict) else None

    def patch(self, document_id: str) -> SanityPatch:
        return SanityPatch(self._client, document_id)

    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        body = await self._client.mutate(
            [{"create": document}], operation="create_document"
        )
        results = body.get("results") or []
        if results and isinstance(results[0], dict):
            created = results[0].get("document")
            if isinstance(created, dict):
                return created
            return {**document, "_id": results[0].get("id")}
        return dict(document)
