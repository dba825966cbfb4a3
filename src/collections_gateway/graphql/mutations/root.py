"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.collection import MutationResult


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addFavoriteCollection")
    async def add_favorite_collection(
        self,
        info: strawberry.Info,
        user_id: str | None = None,
        collection_id: str | None = None,
    ) -> MutationResult | None:
        """Add a collection to a user's favorites."""
        from ..resolvers.favorites import add_favorite_collection

        return await add_favorite_collection(info, user_id, collection_id)

    @strawberry.mutation(name="removeFavoriteCollection")
    async def remove_favorite_collection(
        self,
        info: strawberry.Info,
        user_id: str | None = None,
        collection_id: str | None = None,
    ) -> MutationResult | None:
        """Remove a collection from a user's favorites."""
        from ..resolvers.favorites import remove_favorite_collection

        return await remove_favorite_collection(info, user_id, collection_id)
