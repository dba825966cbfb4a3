"""Document store collection names.

The store has no schema or migrations; collections come into existence when
the first document is written. These constants are the single source of
truth for the names the service reads and writes.
"""

COLLECTION_USERS = "users"
COLLECTION_COLLECTION_TYPES = "collectionTypes"
COLLECTION_COLLECTIONS = "collections"

# Document fields the service filters or mutates on
FIELD_FAVORITE_COLLECTIONS = "favoriteCollections"
FIELD_COLLECTION_TYPE = "type"
