"""
Collection resolvers for GraphQL API
"""

import strawberry

from ...store.base import Document
from ...store.collections import (
    COLLECTION_COLLECTION_TYPES,
    COLLECTION_COLLECTIONS,
    FIELD_COLLECTION_TYPE,
)
from ..context import get_store_from_info
from ..types.collection import Collection, CollectionType


def collection_from_document(document: Document) -> Collection:
    record = document.to_record()
    return Collection(
        id=record["id"],
        name=record.get("name"),
        type=record.get("type"),
        detail=record.get("detail"),
    )


def collection_type_from_document(document: Document) -> CollectionType:
    record = document.to_record()
    return CollectionType(id=record["id"], name=record.get("name"))


async def resolve_collection_types(info: strawberry.Info) -> list[CollectionType]:
    """Get every collection type in the store's natural order."""
    store = get_store_from_info(info)
    documents = await store.list_documents(COLLECTION_COLLECTION_TYPES)
    return [collection_type_from_document(doc) for doc in documents]


async def resolve_collections_by_type(
    info: strawberry.Info, type: str | None
) -> list[Collection]:
    """Get the collections whose ``type`` field equals the given type name.

    Args:
        info: GraphQL info context
        type: Collection type name to match exactly

    Returns:
        Matching collections in the store's natural order
    """
    store = get_store_from_info(info)
    documents = await store.find_documents(COLLECTION_COLLECTIONS, FIELD_COLLECTION_TYPE, type)
    return [collection_from_document(doc) for doc in documents]
