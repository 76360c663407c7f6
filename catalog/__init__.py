"""
Book catalog core: models, criteria search, repository and service layer.
"""

from catalog.models import Book
from catalog.criteria import FieldMatch, SEARCHABLE_FIELDS
from catalog.repository import BookRepository, MongoBookRepository
from catalog.service import CatalogService

__all__ = [
    "Book",
    "FieldMatch",
    "SEARCHABLE_FIELDS",
    "BookRepository",
    "MongoBookRepository",
    "CatalogService",
]
