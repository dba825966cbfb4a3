"""GraphQL API: Strawberry schema, types and resolvers."""
