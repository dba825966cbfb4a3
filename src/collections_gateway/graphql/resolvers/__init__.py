"""Resolver package for the GraphQL schema.

One module per entity; each function backs a single schema field and reads
the document store from the GraphQL context.
"""

# Intentionally empty; functions are defined in sibling modules.
