"""
Catalog service layer.

Mediates between the HTTP boundary and the book repository: existence
checks before mutations and criteria search construction. A missing book
is reported as None or False, never raised; store errors propagate.
"""

from typing import List, Optional

import structlog

from catalog.criteria import FieldMatch
from catalog.models import Book
from catalog.repository import BookRepository

logger = structlog.get_logger(__name__)


class CatalogService:
    """Book catalog operations over a repository."""

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def create(self, book: Book) -> Book:
        """
        Store a new book.

        Args:
            book: Book to store; the store assigns an id when it has none

        Returns:
            The stored book
        """
        stored = await self.repository.save(book)
        logger.info("Book created", book_id=stored.id)
        return stored

    async def get_by_id(self, book_id: str) -> Optional[Book]:
        """
        Get a single book by ID.

        Args:
            book_id: Book identifier, in any format

        Returns:
            Book if found, None otherwise
        """
        return await self.repository.find_by_id(book_id)

    async def get_all(self) -> List[Book]:
        """Every book in the catalog, in store order."""
        return await self.repository.find_all()

    async def get_by_criteria(self, field: str, search_term: str) -> List[Book]:
        """
        Find books whose field contains the search term, ignoring case.

        Args:
            field: Name of the field to search
            search_term: Text the field must contain

        Returns:
            Matching books; empty when the field is not searchable
        """
        match = FieldMatch.build(field, search_term)
        if match is None:
            logger.debug("Criteria search on unknown field", field=field)
            return []
        return await self.repository.query(match)

    async def update(self, book: Book) -> bool:
        """
        Replace an existing book.

        Args:
            book: Replacement record, keyed by its id

        Returns:
            True if the book existed and was replaced, False otherwise
        """
        if book.id is None:
            logger.debug("Update without book id")
            return False

        existing = await self.repository.find_by_id(book.id)
        if existing is None:
            logger.debug("Update target not found", book_id=book.id)
            return False

        await self.repository.save(book)
        logger.info("Book updated", book_id=book.id)
        return True

    async def delete(self, book_id: str) -> bool:
        """
        Delete a book by ID.

        Args:
            book_id: Book identifier

        Returns:
            True if the book existed and was removed, False otherwise
        """
        existing = await self.repository.find_by_id(book_id)
        if existing is None:
            logger.debug("Delete target not found", book_id=book_id)
            return False

        await self.repository.delete_by_id(book_id)
        logger.info("Book deleted", book_id=book_id)
        return True
