"""
Root GraphQL query definitions
"""

import strawberry

from ..types.collection import Collection, CollectionType
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def user(self, info: strawberry.Info, id: str | None = None) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)

    @strawberry.field(name="collectionTypes")
    async def collection_types(self, info: strawberry.Info) -> list[CollectionType | None] | None:
        """Get all collection types."""
        from ..resolvers.collection import resolve_collection_types

        return await resolve_collection_types(info)

    @strawberry.field
    async def collections(
        self, info: strawberry.Info, type: str | None = None
    ) -> list[Collection | None] | None:
        """Get the collections of one type."""
        from ..resolvers.collection import resolve_collections_by_type

        return await resolve_collections_by_type(info, type)

    @strawberry.field(name="favoriteCollections")
    async def favorite_collections(
        self, info: strawberry.Info, user_id: str | None = None
    ) -> list[Collection | None] | None:
        """Get the collections a user has marked as favorite."""
        from ..resolvers.favorites import resolve_favorite_collections

        return await resolve_favorite_collections(info, user_id)
