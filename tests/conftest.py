"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from collections_gateway.graphql.context import build_context
from collections_gateway.store.memory import InMemoryDocumentStore


@pytest.fixture
def seed_data() -> dict[str, dict[str, dict[str, Any]]]:
    """Documents for the three collections the service reads."""
    return {
        "users": {
            "u1": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "favoriteCollections": ["c1", "c2"],
            },
            "u2": {"firstName": "Alan", "lastName": "Turing", "favoriteCollections": []},
            "u3": {"firstName": "Grace"},
        },
        "collectionTypes": {
            "t1": {"name": "mineral"},
            "t2": {"name": "fossil"},
        },
        "collections": {
            "c1": {"name": "Rocks", "type": "mineral", "detail": "Igneous and sedimentary"},
            "c3": {"name": "Gems", "type": "mineral", "detail": "Cut stones"},
            "c4": {"name": "Ammonites", "type": "fossil", "detail": "Jurassic"},
        },
    }


@pytest.fixture
def memory_store(seed_data: dict[str, dict[str, dict[str, Any]]]) -> InMemoryDocumentStore:
    """Provide an in-memory store seeded with sample documents."""
    return InMemoryDocumentStore(seed_data)


@pytest.fixture
def mock_info(memory_store: InMemoryDocumentStore) -> MagicMock:
    """Create a mock GraphQL info object whose context carries the store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = build_context(memory_store)
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
