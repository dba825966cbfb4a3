"""
User GraphQL type definitions
"""

import strawberry


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    favorite_collections: list[str | None] | None = None
