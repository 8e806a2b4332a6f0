"""
Book Pydantic Schemas

Request schemas double as the API's validation contracts:
- BookCreate: every field required
- BookUpdate: every field optional, same per-field constraints

Both are strict (no "300" → 300 coercion, booleans aren't integers) and
closed (unknown properties are rejected), matching JSON Schema semantics.
Use BookCreate.model_json_schema() to export the contract as a JSON Schema
document.

Request bodies are validated through app.validation.validate(), not by
FastAPI directly, so violations come back as a 400 error list instead of
FastAPI's default 422.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

BOOK_EXAMPLE = {
    "isbn": "0691161518",
    "amazon_url": "http://a.co/eobPtX2",
    "author": "Matthew Lane",
    "language": "english",
    "pages": 264,
    "publisher": "Princeton University Press",
    "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
    "year": 2017,
}


class BookCreate(BaseModel):
    """
    Schema for creating a new book.

    All fields are required. Example request body:
    {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up",
        "year": 2017
    }
    """

    isbn: str = Field(..., min_length=1, description="ISBN (primary key)")
    amazon_url: str = Field(..., description="Amazon product URL")
    author: str = Field(..., description="Author name")
    language: str = Field(..., description="Language of the book")
    pages: int = Field(..., gt=0, description="Number of pages")
    publisher: str = Field(..., description="Publisher name")
    title: str = Field(..., description="Book title")
    year: int = Field(..., description="Publication year")

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        json_schema_extra={"example": BOOK_EXAMPLE},
    )


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    All fields are optional; only the ones sent are applied. isbn is still
    listed here: rejecting an isbn change is the router's job and happens
    before this schema is consulted.
    """

    isbn: str | None = Field(default=None, min_length=1)
    amazon_url: str | None = None
    author: str | None = None
    language: str | None = None
    pages: int | None = Field(default=None, gt=0)
    publisher: str | None = None
    title: str | None = None
    year: int | None = None

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        json_schema_extra={"example": {"title": "An Updated Book", "pages": 300}},
    )

    @field_validator("*")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Omitting a field is fine, sending null is not."""
        if v is None:
            raise ValueError("may not be null")
        return v


class BookResponse(BaseModel):
    """A book as returned by the API."""

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": BOOK_EXAMPLE},
    )


class BookDetailResponse(BaseModel):
    """Envelope for single-book responses: {"book": {...}}."""

    book: BookResponse


class BookListResponse(BaseModel):
    """Envelope for list responses: {"books": [...]}."""

    books: list[BookResponse] = Field(
        ...,
        description="Books ordered by title",
    )


class MessageResponse(BaseModel):
    message: str = Field(..., examples=["Book deleted"])


class ErrorResponse(BaseModel):
    """
    Error body.

    Validation failures carry "errors"; every other error carries "message".
    """

    status: int
    message: str | None = None
    errors: list[str] | None = None
