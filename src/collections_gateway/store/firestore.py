"""Google Cloud Firestore document store using the native async client."""

import inspect
import json
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from google.api_core import exceptions as google_exceptions
from google.auth.exceptions import DefaultCredentialsError
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter
from google.oauth2 import service_account

from ..logging import get_logger
from .base import (
    Document,
    DocumentNotFoundError,
    DocumentStore,
    StoreConfigurationError,
    StoreException,
    StoreUnavailableError,
)

logger = get_logger(__name__)

FIRESTORE_SCOPES = ["https://www.googleapis.com/auth/datastore"]

_UNAVAILABLE_ERRORS = (
    google_exceptions.ServiceUnavailable,
    google_exceptions.DeadlineExceeded,
    google_exceptions.RetryError,
)


@contextmanager
def _translate_errors(collection: str, doc_id: str | None = None) -> Iterator[None]:
    """Map Google API errors onto the store exception hierarchy."""
    try:
        yield
    except google_exceptions.NotFound as e:
        raise DocumentNotFoundError(collection, doc_id) from e
    except _UNAVAILABLE_ERRORS as e:
        raise StoreUnavailableError(f"Firestore unavailable: {e}") from e
    except google_exceptions.GoogleAPICallError as e:
        raise StoreException(f"Firestore request failed: {e}") from e


class FirestoreDocumentStore(DocumentStore):
    """Firestore store with service-account or default-credential auth.

    The client is created lazily on first use so the store can be built
    without network access or credentials.
    """

    name = "firestore"

    def __init__(
        self,
        project_id: str | None = None,
        database: str | None = None,
        credentials_path: str | None = None,
        credentials_json: str | None = None,
    ):
        self.project_id = project_id
        self.database = database
        self.credentials_path = credentials_path
        self.credentials_json = credentials_json

        self._client: firestore.AsyncClient | None = None

    def _load_credentials(self) -> Any | None:
        """Load explicit service-account credentials, or None for default credentials."""
        if self.credentials_json:
            try:
                info = json.loads(self.credentials_json)
            except json.JSONDecodeError as e:
                raise StoreConfigurationError(f"Invalid Firestore credentials JSON: {e}") from e
            return service_account.Credentials.from_service_account_info(
                info, scopes=FIRESTORE_SCOPES
            )

        if self.credentials_path:
            path = Path(self.credentials_path)
            if not path.exists():
                raise StoreConfigurationError(f"Credentials file not found: {path}")
            return service_account.Credentials.from_service_account_file(
                str(path), scopes=FIRESTORE_SCOPES
            )

        return None

    def _get_client(self) -> firestore.AsyncClient:
        """Get or create the Firestore async client."""
        if self._client is None:
            credentials = self._load_credentials()

            kwargs: dict[str, Any] = {}
            if credentials is not None:
                kwargs["credentials"] = credentials
            project_id = self.project_id or getattr(credentials, "project_id", None)
            if project_id:
                kwargs["project"] = project_id
            if self.database:
                kwargs["database"] = self.database

            try:
                self._client = firestore.AsyncClient(**kwargs)
            except DefaultCredentialsError as e:
                raise StoreConfigurationError(f"No Firestore credentials available: {e}") from e

            logger.info(
                "Firestore client initialized",
                project=self._client.project,
                database=self.database or "(default)",
            )

        return self._client

    async def get_document(self, collection: str, doc_id: str) -> Document | None:
        client = self._get_client()
        with _translate_errors(collection, doc_id):
            snapshot = await client.collection(collection).document(doc_id).get()
        if not snapshot.exists:
            return None
        return Document(id=snapshot.id, data=snapshot.to_dict() or {})

    async def list_documents(self, collection: str) -> list[Document]:
        client = self._get_client()
        results = []
        with _translate_errors(collection):
            async for snapshot in client.collection(collection).stream():
                results.append(Document(id=snapshot.id, data=snapshot.to_dict() or {}))
        return results

    async def find_documents(self, collection: str, field: str, value: Any) -> list[Document]:
        client = self._get_client()
        query = client.collection(collection).where(filter=FieldFilter(field, "==", value))
        results = []
        with _translate_errors(collection):
            async for snapshot in query.stream():
                results.append(Document(id=snapshot.id, data=snapshot.to_dict() or {}))
        return results

    async def get_documents(self, collection: str, doc_ids: Sequence[str]) -> list[Document]:
        client = self._get_client()
        refs = [client.collection(collection).document(doc_id) for doc_id in doc_ids]
        found: dict[str, Document] = {}
        with _translate_errors(collection):
            async for snapshot in client.get_all(refs):
                if snapshot.exists:
                    found[snapshot.id] = Document(id=snapshot.id, data=snapshot.to_dict() or {})
        # get_all answers in arbitrary order
        return [found[doc_id] for doc_id in doc_ids if doc_id in found]

    async def array_union(self, collection: str, doc_id: str, field: str, value: Any) -> None:
        if not doc_id:
            raise DocumentNotFoundError(collection, doc_id)
        client = self._get_client()
        with _translate_errors(collection, doc_id):
            await client.collection(collection).document(doc_id).update(
                {field: firestore.ArrayUnion([value])}
            )

    async def array_remove(self, collection: str, doc_id: str, field: str, value: Any) -> None:
        if not doc_id:
            raise DocumentNotFoundError(collection, doc_id)
        client = self._get_client()
        with _translate_errors(collection, doc_id):
            await client.collection(collection).document(doc_id).update(
                {field: firestore.ArrayRemove([value])}
            )

    async def close(self) -> None:
        if self._client is None:
            return
        result = self._client.close()
        if inspect.isawaitable(result):
            await result
        self._client = None
        logger.info("Firestore client closed")
