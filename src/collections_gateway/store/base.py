"""Core document store interfaces."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Document:
    """A document read from the store: its key plus its field data."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> dict[str, Any]:
        """Return the document data with ``id`` set to the document key.

        A stored field named ``id`` is overwritten by the key.
        """
        record = dict(self.data)
        record["id"] = self.id
        return record


class StoreException(Exception):
    """Base exception for document store operations."""

    pass


class DocumentNotFoundError(StoreException):
    """The addressed document does not exist."""

    def __init__(self, collection: str, doc_id: str | None):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"Document not found: {collection}/{doc_id}")


class StoreUnavailableError(StoreException):
    """The store could not be reached or did not answer in time."""

    pass


class StoreConfigurationError(StoreException):
    """The store is misconfigured (unknown backend, bad credentials, ...)."""

    pass


class DocumentStore(ABC):
    """Abstract base class for document store clients.

    Documents are addressed by collection name and document id. All methods
    are coroutines; implementations must not block the event loop.
    """

    name: str = "abstract"

    @abstractmethod
    async def get_document(self, collection: str, doc_id: str) -> Document | None:
        """Fetch a single document, or None when it does not exist."""
        pass

    @abstractmethod
    async def list_documents(self, collection: str) -> list[Document]:
        """Fetch every document in a collection, in the store's natural order."""
        pass

    @abstractmethod
    async def find_documents(self, collection: str, field: str, value: Any) -> list[Document]:
        """Fetch the documents whose ``field`` equals ``value``."""
        pass

    @abstractmethod
    async def get_documents(self, collection: str, doc_ids: Sequence[str]) -> list[Document]:
        """Fetch several documents by id in one batched lookup.

        Ids that do not exist are omitted from the result. Callers must not
        pass an empty sequence.
        """
        pass

    @abstractmethod
    async def array_union(self, collection: str, doc_id: str, field: str, value: Any) -> None:
        """Atomically add ``value`` to the array ``field`` unless already present.

        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        pass

    @abstractmethod
    async def array_remove(self, collection: str, doc_id: str, field: str, value: Any) -> None:
        """Atomically remove every occurrence of ``value`` from the array ``field``.

        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        pass

    async def close(self) -> None:
        """Release any client resources."""
        return None
