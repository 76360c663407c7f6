"""
Pytest configuration and shared fixtures.
"""

import time
from typing import Dict, List, Optional

import pytest
from jose import jwt

from catalog.criteria import FieldMatch
from catalog.models import Book
from catalog.service import CatalogService

TEST_SECRET = "test-signing-secret"
TEST_ISSUER = "http://auth.test/realms/book-catalog"


class InMemoryBookRepository:
    """Book repository keeping documents in a dict, assigning sequential ids."""

    def __init__(self, books: Optional[List[Book]] = None):
        self.documents: Dict[str, dict] = {}
        self._next_id = 1
        self.calls: List[str] = []
        for book in books or []:
            self._store(book)

    def _store(self, book: Book) -> Book:
        if book.id is None:
            book = book.model_copy(update={"id": str(self._next_id)})
            self._next_id += 1
        self.documents[book.id] = book.model_dump(exclude_none=True)
        return book

    async def save(self, book: Book) -> Book:
        self.calls.append("save")
        return self._store(book)

    async def find_by_id(self, book_id: str) -> Optional[Book]:
        self.calls.append("find_by_id")
        document = self.documents.get(book_id)
        return Book(**document) if document is not None else None

    async def find_all(self) -> List[Book]:
        self.calls.append("find_all")
        return [Book(**document) for document in self.documents.values()]

    async def delete_by_id(self, book_id: str) -> None:
        self.calls.append("delete_by_id")
        self.documents.pop(book_id, None)

    async def query(self, match: FieldMatch) -> List[Book]:
        self.calls.append("query")
        return [Book(**document) for document in self.documents.values() if match.matches(document)]


@pytest.fixture
def sample_books():
    """Create sample books for testing."""
    return [
        Book(title="Dune", author="Frank Herbert", genre="Science Fiction", published_year=1965),
        Book(title="Dune Messiah", author="Frank Herbert", genre="Science Fiction", published_year=1969),
        Book(title="The Left Hand of Darkness", author="Ursula K. Le Guin", genre="Science Fiction", published_year=1969),
        Book(title="Emma", author="Jane Austen", genre="Romance", published_year=1815),
    ]


@pytest.fixture
def repository():
    """Create an empty in-memory repository."""
    return InMemoryBookRepository()


@pytest.fixture
def seeded_repository(sample_books):
    """Create an in-memory repository holding the sample books."""
    return InMemoryBookRepository(sample_books)


@pytest.fixture
def catalog_service(repository):
    """Create a catalog service over the empty repository."""
    return CatalogService(repository)


@pytest.fixture
def seeded_service(seeded_repository):
    """Create a catalog service over the seeded repository."""
    return CatalogService(seeded_repository)


def make_token(secret: str = TEST_SECRET, issuer: str = TEST_ISSUER, **overrides) -> str:
    """Create a signed HS256 access token."""
    now = int(time.time())
    claims = {
        "sub": "user-123",
        "iss": issuer,
        "aud": "account",
        "iat": now,
        "exp": now + 300,
        "scope": "openid profile",
        "preferred_username": "reader",
    }
    claims.update(overrides)
    claims = {key: value for key, value in claims.items() if value is not None}
    return jwt.encode(claims, secret, algorithm="HS256")


@pytest.fixture
def token_factory():
    """Factory for signed test access tokens."""
    return make_token


@pytest.fixture
def auth_settings():
    """API settings verifying tokens with the shared test secret."""
    from api.config import APIConfig
    return APIConfig(
        oauth_issuer_uri=TEST_ISSUER,
        jwt_algorithms="HS256",
        jwt_secret_key=TEST_SECRET,
    )
