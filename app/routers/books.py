"""
Books Router

CRUD endpoints for books, mounted at /books:

    GET    /books/          {"books": [...]}
    GET    /books/{isbn}    {"book": {...}}
    POST   /books/          {"book": {...}}            201
    PUT    /books/{isbn}    {"book": {...}}
    DELETE /books/{isbn}    {"message": "Book deleted"}

Each handler is a straight line: extract input → validate (writes only) →
repository call → shape the response. Failures are raised as the typed
errors from app.exceptions and turned into responses by the handler
registered in app.main; nothing is caught here.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from app.dependencies import BookFilters, BookRepo
from app.exceptions import BookValidationError, ImmutableFieldError
from app.schemas import (
    BookCreate,
    BookDetailResponse,
    BookListResponse,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    MessageResponse,
)
from app.validation import validate

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)

# Request bodies are taken as raw JSON objects and checked by validate(),
# so schema violations are reported in our 400 format.
JsonObject = Annotated[dict[str, Any], Body()]

IMMUTABLE_FIELDS = ("isbn",)


# The collection routes answer both /books and /books/ (no redirect);
# only the slashed form is documented.
@router.get("", response_model=BookListResponse, include_in_schema=False)
@router.get(
    "/",
    response_model=BookListResponse,
    summary="List books",
    description="List all books ordered by title, optionally filtered by exact field values.",
)
def list_books(filters: BookFilters, repository: BookRepo) -> BookListResponse:
    books = repository.find_all(filters.as_dict())
    return BookListResponse(
        books=[BookResponse.model_validate(book) for book in books],
    )


@router.get(
    "/{isbn}",
    response_model=BookDetailResponse,
    summary="Get a book by ISBN",
)
def get_book(isbn: str, repository: BookRepo) -> BookDetailResponse:
    book = repository.find_one(isbn)
    return BookDetailResponse(book=BookResponse.model_validate(book))


@router.post(
    "",
    response_model=BookDetailResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "/",
    response_model=BookDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a book",
    description="Create a book. Every field is required.",
    responses={400: {"model": ErrorResponse, "description": "Invalid book data"}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": BookCreate.model_json_schema()}},
        },
    },
)
def create_book(payload: JsonObject, repository: BookRepo) -> BookDetailResponse:
    result = validate(payload, BookCreate)
    if not result.valid:
        raise BookValidationError(result.errors)

    book = repository.create(result.data)
    return BookDetailResponse(book=BookResponse.model_validate(book))


@router.put(
    "/{isbn}",
    response_model=BookDetailResponse,
    summary="Update a book",
    description=(
        "Update any subset of a book's fields. The ISBN cannot be changed; "
        "sending it is rejected with 400 'Not Allowed'."
    ),
    responses={400: {"model": ErrorResponse, "description": "Invalid update"}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": BookUpdate.model_json_schema()}},
        },
    },
)
def update_book(
    isbn: str,
    payload: JsonObject,
    repository: BookRepo,
) -> BookDetailResponse:
    # Immutability is checked before the schema, so an isbn change is
    # always reported as "Not Allowed" even if other fields are invalid.
    for field in IMMUTABLE_FIELDS:
        if field in payload:
            raise ImmutableFieldError(field)

    result = validate(payload, BookUpdate)
    if not result.valid:
        raise BookValidationError(result.errors)

    book = repository.update(isbn, result.data)
    return BookDetailResponse(book=BookResponse.model_validate(book))


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    summary="Delete a book",
)
def delete_book(isbn: str, repository: BookRepo) -> MessageResponse:
    repository.remove(isbn)
    return MessageResponse(message="Book deleted")
