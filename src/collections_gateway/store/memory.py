"""In-process document store for tests and local development."""

import asyncio
import copy
import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from ..logging import get_logger
from .base import Document, DocumentNotFoundError, DocumentStore, StoreConfigurationError

logger = get_logger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """Dictionary-backed store mirroring the Firestore semantics the service relies on.

    Collections keep insertion order, which is their natural return order.
    Array updates follow Firestore: a missing or non-array field is replaced
    by the resulting array.
    """

    name = "memory"

    def __init__(self, data: Mapping[str, Mapping[str, Mapping[str, Any]]] | None = None):
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._lock = asyncio.Lock()
        for collection, documents in (data or {}).items():
            for doc_id, doc in documents.items():
                self.put_document(collection, doc_id, doc)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryDocumentStore":
        """Build a store seeded from ``{collection: {doc_id: {field: value}}}`` JSON."""
        seed_path = Path(path)
        if not seed_path.exists():
            raise StoreConfigurationError(f"Seed file not found: {seed_path}")

        try:
            data = json.loads(seed_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StoreConfigurationError(f"Invalid seed file {seed_path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreConfigurationError(f"Seed file {seed_path} must contain a JSON object")

        store = cls(data)
        logger.info(
            "Seeded in-memory store",
            path=str(seed_path),
            collections={name: len(docs) for name, docs in store._collections.items()},
        )
        return store

    def put_document(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        """Create or replace a document."""
        self._collections.setdefault(collection, {})[doc_id] = copy.deepcopy(dict(data))

    def _snapshot(self, doc_id: str, data: dict[str, Any]) -> Document:
        return Document(id=doc_id, data=copy.deepcopy(data))

    async def get_document(self, collection: str, doc_id: str) -> Document | None:
        data = self._collections.get(collection, {}).get(doc_id)
        if data is None:
            return None
        return self._snapshot(doc_id, data)

    async def list_documents(self, collection: str) -> list[Document]:
        documents = self._collections.get(collection, {})
        return [self._snapshot(doc_id, data) for doc_id, data in documents.items()]

    async def find_documents(self, collection: str, field: str, value: Any) -> list[Document]:
        documents = self._collections.get(collection, {})
        return [
            self._snapshot(doc_id, data)
            for doc_id, data in documents.items()
            if field in data and data[field] == value
        ]

    async def get_documents(self, collection: str, doc_ids: Sequence[str]) -> list[Document]:
        documents = self._collections.get(collection, {})
        return [
            self._snapshot(doc_id, documents[doc_id]) for doc_id in doc_ids if doc_id in documents
        ]

    def _existing(self, collection: str, doc_id: str) -> dict[str, Any]:
        data = self._collections.get(collection, {}).get(doc_id) if doc_id else None
        if data is None:
            raise DocumentNotFoundError(collection, doc_id)
        return data

    async def array_union(self, collection: str, doc_id: str, field: str, value: Any) -> None:
        async with self._lock:
            data = self._existing(collection, doc_id)
            current = data.get(field)
            values = list(current) if isinstance(current, list) else []
            if value not in values:
                values.append(value)
            data[field] = values

    async def array_remove(self, collection: str, doc_id: str, field: str, value: Any) -> None:
        async with self._lock:
            data = self._existing(collection, doc_id)
            current = data.get(field)
            values = list(current) if isinstance(current, list) else []
            data[field] = [item for item in values if item != value]
