"""Factory for creating the configured document store."""

from ..config import Settings, settings
from ..logging import get_logger
from .base import DocumentStore, StoreConfigurationError
from .firestore import FirestoreDocumentStore
from .memory import InMemoryDocumentStore

logger = get_logger(__name__)

SUPPORTED_BACKENDS = ("firestore", "memory")


def create_store(config: Settings | None = None) -> DocumentStore:
    """Create a document store from settings.

    Args:
        config: Settings to read; defaults to the global settings

    Returns:
        DocumentStore for the configured backend

    Raises:
        StoreConfigurationError: If the backend is unknown
    """
    config = config or settings
    backend = config.store_backend.lower()

    if backend == "firestore":
        store: DocumentStore = FirestoreDocumentStore(
            project_id=config.firestore_project_id,
            database=config.firestore_database,
            credentials_path=config.firestore_credentials_path,
            credentials_json=config.firestore_credentials_json,
        )
    elif backend == "memory":
        if config.memory_seed_path:
            store = InMemoryDocumentStore.from_json_file(config.memory_seed_path)
        else:
            store = InMemoryDocumentStore()
    else:
        raise StoreConfigurationError(
            f"Unknown store backend '{config.store_backend}'. "
            f"Supported: {', '.join(SUPPORTED_BACKENDS)}"
        )

    logger.info("Created document store", backend=store.name)
    return store
