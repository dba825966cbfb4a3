"""Tests for the in-memory document store."""

import json

import pytest

from collections_gateway.store.base import DocumentNotFoundError, StoreConfigurationError
from collections_gateway.store.memory import InMemoryDocumentStore


class TestInMemoryDocumentStore:
    """Test in-memory store semantics."""

    @pytest.mark.asyncio
    async def test_get_document(self, memory_store):
        doc = await memory_store.get_document("users", "u1")

        assert doc is not None
        assert doc.id == "u1"
        assert doc.data["firstName"] == "Ada"

    @pytest.mark.asyncio
    async def test_get_missing_document_returns_none(self, memory_store):
        assert await memory_store.get_document("users", "nobody") is None
        assert await memory_store.get_document("unknown", "u1") is None

    @pytest.mark.asyncio
    async def test_returned_documents_are_copies(self, memory_store):
        doc = await memory_store.get_document("users", "u1")
        doc.data["favoriteCollections"].append("tampered")

        again = await memory_store.get_document("users", "u1")
        assert again.data["favoriteCollections"] == ["c1", "c2"]

    @pytest.mark.asyncio
    async def test_list_documents_keeps_insertion_order(self, memory_store):
        docs = await memory_store.list_documents("collectionTypes")

        assert [doc.id for doc in docs] == ["t1", "t2"]

    @pytest.mark.asyncio
    async def test_find_documents_by_equality(self, memory_store):
        docs = await memory_store.find_documents("collections", "type", "mineral")

        assert [doc.id for doc in docs] == ["c1", "c3"]

    @pytest.mark.asyncio
    async def test_find_documents_ignores_missing_field(self):
        store = InMemoryDocumentStore({"collections": {"a": {"name": "untyped"}}})

        assert await store.find_documents("collections", "type", None) == []

    @pytest.mark.asyncio
    async def test_get_documents_skips_missing_ids(self, memory_store):
        docs = await memory_store.get_documents("collections", ["c3", "missing", "c1"])

        assert [doc.id for doc in docs] == ["c3", "c1"]

    @pytest.mark.asyncio
    async def test_array_union_is_idempotent(self, memory_store):
        await memory_store.array_union("users", "u1", "favoriteCollections", "c3")
        await memory_store.array_union("users", "u1", "favoriteCollections", "c3")

        doc = await memory_store.get_document("users", "u1")
        assert doc.data["favoriteCollections"] == ["c1", "c2", "c3"]

    @pytest.mark.asyncio
    async def test_array_union_creates_missing_field(self, memory_store):
        await memory_store.array_union("users", "u3", "favoriteCollections", "c1")

        doc = await memory_store.get_document("users", "u3")
        assert doc.data["favoriteCollections"] == ["c1"]

    @pytest.mark.asyncio
    async def test_array_remove_removes_all_occurrences(self):
        store = InMemoryDocumentStore({"users": {"u": {"favoriteCollections": ["a", "b", "a"]}}})

        await store.array_remove("users", "u", "favoriteCollections", "a")

        doc = await store.get_document("users", "u")
        assert doc.data["favoriteCollections"] == ["b"]

    @pytest.mark.asyncio
    async def test_array_remove_absent_value_is_noop(self, memory_store):
        await memory_store.array_remove("users", "u1", "favoriteCollections", "c9")

        doc = await memory_store.get_document("users", "u1")
        assert doc.data["favoriteCollections"] == ["c1", "c2"]

    @pytest.mark.asyncio
    async def test_array_updates_on_missing_document_raise(self, memory_store):
        with pytest.raises(DocumentNotFoundError):
            await memory_store.array_union("users", "ghost", "favoriteCollections", "c1")
        with pytest.raises(DocumentNotFoundError):
            await memory_store.array_remove("users", "ghost", "favoriteCollections", "c1")

        assert await memory_store.get_document("users", "ghost") is None


class TestSeedFile:
    """Test seeding the store from JSON."""

    @pytest.mark.asyncio
    async def test_from_json_file(self, tmp_path, seed_data):
        path = tmp_path / "seed.json"
        path.write_text(json.dumps(seed_data))

        store = InMemoryDocumentStore.from_json_file(path)

        docs = await store.list_documents("collections")
        assert [doc.id for doc in docs] == ["c1", "c3", "c4"]

    def test_missing_seed_file(self, tmp_path):
        with pytest.raises(StoreConfigurationError, match="not found"):
            InMemoryDocumentStore.from_json_file(tmp_path / "absent.json")

    def test_invalid_seed_file(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("{not json")

        with pytest.raises(StoreConfigurationError, match="Invalid seed file"):
            InMemoryDocumentStore.from_json_file(path)

    def test_seed_file_must_be_object(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("[]")

        with pytest.raises(StoreConfigurationError, match="JSON object"):
            InMemoryDocumentStore.from_json_file(path)
