"""
Favorite collection resolvers for GraphQL API
"""

from collections.abc import Awaitable, Callable
from typing import Any

import strawberry

from ...logging import get_logger
from ...store.base import DocumentStore, StoreException
from ...store.collections import (
    COLLECTION_COLLECTIONS,
    COLLECTION_USERS,
    FIELD_FAVORITE_COLLECTIONS,
)
from ..context import get_store_from_info
from ..results import WriteErrorKind, WriteOutcome
from ..types.collection import Collection, MutationResult
from .collection import collection_from_document

logger = get_logger(__name__)


def favorite_ids(user_data: dict[str, Any]) -> list[str]:
    """Return the user's favorite collection ids, de-duplicated, in stored order."""
    favorites = user_data.get(FIELD_FAVORITE_COLLECTIONS)
    if not isinstance(favorites, list):
        return []

    seen: set[str] = set()
    ids = []
    for collection_id in favorites:
        if isinstance(collection_id, str) and collection_id and collection_id not in seen:
            seen.add(collection_id)
            ids.append(collection_id)
    return ids


async def resolve_favorite_collections(
    info: strawberry.Info, user_id: str | None
) -> list[Collection]:
    """Get the collections a user has marked as favorite.

    Favorites that no longer exist in the store are dropped. An empty
    favorites list returns immediately without a batched lookup.
    """
    if not user_id:
        return []

    store = get_store_from_info(info)
    user = await store.get_document(COLLECTION_USERS, user_id)
    if user is None:
        logger.info("User not found for favorites", user_id=user_id)
        return []

    ids = favorite_ids(user.data)
    if not ids:
        return []

    documents = await store.get_documents(COLLECTION_COLLECTIONS, ids)
    if len(documents) < len(ids):
        logger.debug(
            "Some favorite collections no longer exist",
            user_id=user_id,
            requested=len(ids),
            found=len(documents),
        )
    return [collection_from_document(doc) for doc in documents]


async def _write_favorite(
    info: strawberry.Info,
    operation: str,
    pick_write: Callable[[DocumentStore], Callable[[str, str, str, Any], Awaitable[None]]],
    user_id: str | None,
    collection_id: str | None,
) -> WriteOutcome:
    if not user_id or not collection_id:
        outcome = WriteOutcome.failed(
            WriteErrorKind.INVALID_ARGUMENT, "userId and collectionId are required"
        )
    else:
        try:
            write = pick_write(get_store_from_info(info))
            await write(COLLECTION_USERS, user_id, FIELD_FAVORITE_COLLECTIONS, collection_id)
            outcome = WriteOutcome.ok()
        except StoreException as e:
            outcome = WriteOutcome.from_exception(e)
        except Exception as e:
            logger.exception("Unexpected error writing favorites", operation=operation)
            outcome = WriteOutcome.from_exception(e)

    if outcome.success:
        logger.info(operation, user_id=user_id, collection_id=collection_id)
    else:
        logger.warning(
            f"{operation} failed",
            user_id=user_id,
            collection_id=collection_id,
            error_kind=outcome.error.value if outcome.error else None,
            error=outcome.detail,
        )
    return outcome


async def add_favorite(
    info: strawberry.Info, user_id: str | None, collection_id: str | None
) -> WriteOutcome:
    """Add a collection to the user's favorites; already present is a successful no-op."""
    return await _write_favorite(
        info,
        "Favorite collection added",
        lambda store: store.array_union,
        user_id,
        collection_id,
    )


async def remove_favorite(
    info: strawberry.Info, user_id: str | None, collection_id: str | None
) -> WriteOutcome:
    """Remove a collection from the user's favorites; absent is a successful no-op."""
    return await _write_favorite(
        info,
        "Favorite collection removed",
        lambda store: store.array_remove,
        user_id,
        collection_id,
    )


async def add_favorite_collection(
    info: strawberry.Info, user_id: str | None, collection_id: str | None
) -> MutationResult:
    return (await add_favorite(info, user_id, collection_id)).to_mutation_result()


async def remove_favorite_collection(
    info: strawberry.Info, user_id: str | None, collection_id: str | None
) -> MutationResult:
    return (await remove_favorite(info, user_id, collection_id)).to_mutation_result()
