"""Document store adapters."""

from src.infrastructure.document_store.sanity_adapter import (
    SanityAssetStore,
    SanityDocumentStore,
    SanityPatch,
)

__all__ = ["SanityAssetStore", "SanityDocumentStore", "SanityPatch"]
