"""Document store protocol (port).

Abstracts the headless-CMS document store as an opaque key-document store
with query, patch, create and binary asset upload. Field names inside
documents follow the store's conventions (``_id``, ``_type``, camelCase).

Implementations raise on transport or API failure; the application layer
turns exceptions into Result failures at its boundary.
"""

from typing import Any, Protocol


class PatchProtocol(Protocol):
    """Pending single-document patch.

    ``set`` accumulates fields; ``commit`` writes them in one atomic mutation.
    """

    def set(self, fields: dict[str, Any]) -> "PatchProtocol":
        """Add fields to set; returns the same patch for chaining."""
        ...

    async def commit(self) -> dict[str, Any]:
        """Apply the patch. Returns the mutation result."""
        ...


class AssetStoreProtocol(Protocol):
    """Binary asset upload."""

    async def upload(
        self,
        kind: str,
        data: bytes,
        *,
        filename: str,
        content_type: str,
    ) -> dict[str, Any]:
        """Upload bytes as an asset.

        Args:
            kind: Asset kind ("file" or "image").
            data: Raw bytes.
            filename: Original filename stored with the asset.
            content_type: MIME type.

        Returns:
            Asset document; ``_id`` is the asset ID to reference.
        """
        ...


class DocumentStoreProtocol(Protocol):
    """Key-document store used for contract records and the activity log."""

    @property
    def assets(self) -> AssetStoreProtocol:
        """Asset upload endpoint."""
        ...

    async def fetch_one(
        self, query: str, params: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Run a query expected to return a single document (or None)."""
        ...

    def patch(self, document_id: str) -> PatchProtocol:
        """Start a patch on one document."""
        ...

    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        """Create a document; returns it with its assigned ``_id``."""
        ...
