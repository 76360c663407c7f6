"""
Pydantic models for book catalog records.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Descriptive attributes hold any scalar; values are stored and returned as given.
Scalar = Union[StrictStr, StrictInt, StrictFloat, StrictBool]


class Book(BaseModel):
    """
    Book catalog record.

    Descriptive attributes accept any scalar value and attributes beyond the
    declared ones are kept as-is, so the store shape is not constrained and
    documents written by other clients still read back.
    """
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "id": "652f1c0e9b1e8a3f5c2d4e6f",
                "title": "Dune",
                "author": "Frank Herbert",
                "publisher": "Chilton Books",
                "genre": "Science Fiction",
                "isbn": "9780441172719",
                "language": "en",
                "published_year": 1965,
            }
        },
    )

    id: Optional[str] = Field(None, description="Unique book identifier, assigned by the store when absent")
    title: Optional[Scalar] = Field(None, description="Book title")
    author: Optional[Scalar] = Field(None, description="Book author")
    publisher: Optional[Scalar] = Field(None, description="Publisher name")
    genre: Optional[Scalar] = Field(None, description="Book genre")
    isbn: Optional[Scalar] = Field(None, description="ISBN")
    language: Optional[Scalar] = Field(None, description="Language of the edition")
    description: Optional[Scalar] = Field(None, description="Book description")
    published_year: Optional[Scalar] = Field(None, description="Year of publication")
