"""
Collection GraphQL type definitions
"""

import strawberry


@strawberry.type
class CollectionType:
    """A category of collections, referenced from Collection.type by name."""

    name: str | None = None
    id: str | None = None


@strawberry.type
class Collection:
    """Collection type for GraphQL API."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    detail: str | None = None


@strawberry.type
class MutationResult:
    """Outcome of a favorites mutation."""

    success: bool | None = None
