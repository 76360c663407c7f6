"""
Repository layer: identity-keyed CRUD over the book collection.
"""

from typing import Any, Dict, List, Optional, Protocol, Union

import structlog
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from catalog.criteria import FieldMatch
from catalog.models import Book

logger = structlog.get_logger(__name__)


class BookRepository(Protocol):
    """Store operations the catalog service depends on."""

    async def save(self, book: Book) -> Book: ...

    async def find_by_id(self, book_id: str) -> Optional[Book]: ...

    async def find_all(self) -> List[Book]: ...

    async def delete_by_id(self, book_id: str) -> None: ...

    async def query(self, match: FieldMatch) -> List[Book]: ...


def to_document_id(book_id: str) -> Union[ObjectId, str]:
    """
    Store representation of a book id.

    Only the canonical lower-case hex spelling becomes an ObjectId, so the
    id read back is always the id that was written.
    """
    if isinstance(book_id, str) and len(book_id) == 24 and ObjectId.is_valid(book_id):
        object_id = ObjectId(book_id)
        if str(object_id) == book_id:
            return object_id
    return book_id


def to_document(book: Book) -> Dict[str, Any]:
    """
    Convert a Book into a MongoDB document.

    Unset attributes are left out so that a save fully replaces the record.
    """
    document = book.model_dump(exclude={"id"}, exclude_none=True)
    document.pop("_id", None)
    if book.id is not None:
        document["_id"] = to_document_id(book.id)
    return document


def from_document(document: Dict[str, Any]) -> Book:
    """Convert a MongoDB document into a Book."""
    data = dict(document)
    data["id"] = str(data.pop("_id"))
    return Book(**data)


class MongoBookRepository:
    """
    MongoDB-backed book repository.
    Each method is a single round-trip on the collection; driver errors propagate.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def save(self, book: Book) -> Book:
        """
        Insert a book, or replace it when it carries an id.

        Args:
            book: Book to store

        Returns:
            The stored book, with the generated id for new records
        """
        document = to_document(book)
        if book.id is None:
            result = await self.collection.insert_one(document)
            logger.debug("Inserted book document", book_id=str(result.inserted_id))
            return book.model_copy(update={"id": str(result.inserted_id)})

        await self.collection.replace_one({"_id": document["_id"]}, document, upsert=True)
        logger.debug("Replaced book document", book_id=book.id)
        return book

    async def find_by_id(self, book_id: str) -> Optional[Book]:
        document = await self.collection.find_one({"_id": to_document_id(book_id)})
        if document is None:
            return None
        return from_document(document)

    async def find_all(self) -> List[Book]:
        cursor = self.collection.find({})
        return [from_document(document) async for document in cursor]

    async def delete_by_id(self, book_id: str) -> None:
        await self.collection.delete_one({"_id": to_document_id(book_id)})

    async def query(self, match: FieldMatch) -> List[Book]:
        """Find every book satisfying a field match."""
        cursor = self.collection.find(match.to_filter())
        return [from_document(document) async for document in cursor]
