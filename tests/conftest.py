"""
pytest Fixtures for Book Catalog Tests

Shared fixtures used across all test files.

Every test gets its own CatalogStore, so tests never see each other's books
or reviews. The API client swaps the application's store for the test's
store through FastAPI's dependency overrides.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app
import os

os.environ["SEED_SAMPLE_DATA"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from book_catalog.dependencies import get_store
from book_catalog.main import app
from book_catalog.models import Book
from book_catalog.sample_data import create_sample_store
from book_catalog.store import CatalogStore

# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def store() -> CatalogStore:
    """An empty catalog store."""
    return CatalogStore()


@pytest.fixture
def seeded_store() -> CatalogStore:
    """
    A store loaded with the sample catalog.

    Books "1"-"6" and reviews "1"-"3"; book "1" has reviews rated 5 and 4,
    book "2" one review rated 5.
    """
    return create_sample_store()


# =============================================================================
# CLIENT FIXTURES
# =============================================================================


def _client_for(store: CatalogStore) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def client(seeded_store: CatalogStore) -> Generator[TestClient, None, None]:
    """Test client backed by the sample catalog."""
    yield from _client_for(seeded_store)


@pytest.fixture
def empty_client(store: CatalogStore) -> Generator[TestClient, None, None]:
    """Test client backed by an empty catalog."""
    yield from _client_for(store)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def austen_books(store: CatalogStore) -> tuple[Book, Book]:
    """Two Austen novels sharing the Classic tag."""
    pride = store.add_book(
        title="Pride and Prejudice",
        author="Austen",
        genre=["Classic", "Romance"],
        cover_image="https://example.com/pride.jpg",
    )
    emma = store.add_book(
        title="Emma",
        author="Austen",
        genre=["Classic", "Fiction"],
        cover_image="https://example.com/emma.jpg",
    )
    return pride, emma


@pytest.fixture
def book_payload() -> dict:
    """A valid request body for POST /books/."""
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "genre": ["Science Fiction", "Adventure"],
        "description": "A desert planet and its spice.",
        "cover_image": "https://example.com/dune.jpg",
        "publication_year": 1965,
    }
