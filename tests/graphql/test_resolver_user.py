"""
Tests for user GraphQL resolvers
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import strawberry

from collections_gateway.graphql.context import build_context
from collections_gateway.graphql.resolvers.user import resolve_user_by_id, user_from_document
from collections_gateway.store.base import Document, StoreConfigurationError, StoreUnavailableError


class TestResolveUserById:
    """Tests for resolve_user_by_id function."""

    @pytest.mark.asyncio
    async def test_existing_user(self, mock_info):
        result = await resolve_user_by_id(mock_info, "u1")

        assert result is not None
        assert result.id == "u1"
        assert result.first_name == "Ada"
        assert result.last_name == "Lovelace"
        assert result.favorite_collections == ["c1", "c2"]

    @pytest.mark.asyncio
    async def test_missing_user_returns_none(self, mock_info):
        assert await resolve_user_by_id(mock_info, "nobody") is None

    @pytest.mark.asyncio
    async def test_no_id_returns_none_without_store_call(self):
        store = MagicMock()
        store.get_document = AsyncMock()
        info = MagicMock(spec=strawberry.Info)
        info.context = build_context(store)

        assert await resolve_user_by_id(info, None) is None
        assert await resolve_user_by_id(info, "") is None
        store.get_document.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_fields_are_none(self, mock_info):
        result = await resolve_user_by_id(mock_info, "u3")

        assert result.first_name == "Grace"
        assert result.last_name is None
        assert result.favorite_collections is None

    @pytest.mark.asyncio
    async def test_read_failures_propagate(self):
        store = MagicMock()
        store.get_document = AsyncMock(side_effect=StoreUnavailableError("down"))
        info = MagicMock(spec=strawberry.Info)
        info.context = build_context(store)

        with pytest.raises(StoreUnavailableError):
            await resolve_user_by_id(info, "u1")

    @pytest.mark.asyncio
    async def test_missing_store_in_context(self):
        info = MagicMock(spec=strawberry.Info)
        info.context = {"request": None}

        with pytest.raises(StoreConfigurationError):
            await resolve_user_by_id(info, "u1")


def test_document_key_overrides_stored_id():
    user = user_from_document(Document(id="u1", data={"id": "stale", "firstName": "Ada"}))

    assert user.id == "u1"
