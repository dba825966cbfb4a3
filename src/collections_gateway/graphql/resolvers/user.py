"""
User resolvers for GraphQL API
"""

import strawberry

from ...logging import get_logger
from ...store.base import Document
from ...store.collections import COLLECTION_USERS, FIELD_FAVORITE_COLLECTIONS
from ..context import get_store_from_info
from ..types.user import User

logger = get_logger(__name__)


def user_from_document(document: Document) -> User:
    """Convert a user document to the GraphQL type."""
    record = document.to_record()
    favorites = record.get(FIELD_FAVORITE_COLLECTIONS)
    return User(
        id=record["id"],
        first_name=record.get("firstName"),
        last_name=record.get("lastName"),
        favorite_collections=list(favorites) if isinstance(favorites, list) else None,
    )


async def resolve_user_by_id(info: strawberry.Info, id: str | None) -> User | None:
    """
    Resolve a user by document id.

    Returns None when no id is given or the document does not exist.
    """
    if not id:
        return None

    store = get_store_from_info(info)
    document = await store.get_document(COLLECTION_USERS, id)
    if document is None:
        logger.info("User not found", user_id=id)
        return None

    return user_from_document(document)
