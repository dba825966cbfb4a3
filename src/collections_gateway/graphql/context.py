"""
GraphQL request context helpers
"""

from typing import Any

import strawberry

from ..store.base import DocumentStore, StoreConfigurationError


def build_context(store: DocumentStore, request: Any | None = None) -> dict[str, Any]:
    """Build the context dict handed to every resolver."""
    return {"request": request, "store": store}


def get_store_from_info(info: strawberry.Info) -> DocumentStore:
    """Get the document store injected into the GraphQL context."""
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if store is None:
        raise StoreConfigurationError("No document store in GraphQL context")
    return store
