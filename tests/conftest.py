"""
Pytest fixtures shared by the test suite.

Services run against the in-memory document store; the Supabase store is
exercised with a mocked client in its own module.
"""

import pytest

from simple_tags.core.repositories.implementations.memory.document_store import InMemoryDocumentStore
from simple_tags.core.services.tagging_service import TaggingService


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Fresh in-memory store per test."""
    return InMemoryDocumentStore()


@pytest.fixture
def users(store: InMemoryDocumentStore) -> TaggingService:
    """Tagging service for a `users` collection."""
    return TaggingService(store, "users")


@pytest.fixture
def organizations(store: InMemoryDocumentStore) -> TaggingService:
    """Tagging service for an `organizations` collection."""
    return TaggingService(store, "organizations")
