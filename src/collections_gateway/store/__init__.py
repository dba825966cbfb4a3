"""Document store access for the Collections Gateway."""

from .base import (
    Document,
    DocumentNotFoundError,
    DocumentStore,
    StoreConfigurationError,
    StoreException,
    StoreUnavailableError,
)
from .factory import create_store
from .firestore import FirestoreDocumentStore
from .memory import InMemoryDocumentStore

__all__ = [
    "Document",
    "DocumentNotFoundError",
    "DocumentStore",
    "FirestoreDocumentStore",
    "InMemoryDocumentStore",
    "StoreConfigurationError",
    "StoreException",
    "StoreUnavailableError",
    "create_store",
]
