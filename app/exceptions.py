"""
Books API Exceptions

Every failure the API reports deliberately is one of these types. They are
raised wherever the problem is detected (router, repository) and travel up
unmodified; a single exception handler in app.main turns them into JSON
responses using status_code and to_dict().

Taxonomy:
- BookValidationError: payload fails a schema → 400 with the violation list
- ImmutableFieldError: update tries to change the isbn → 400 "Not Allowed"
- NotFoundError: no row for the given isbn → 404
- StoreError: any other persistence failure → 500
  - ConflictError: integrity violation such as a duplicate isbn
"""

from typing import Any

from fastapi import status


class BooksAPIError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status_code, "message": self.message}


class BookValidationError(BooksAPIError):
    """Request payload does not satisfy the create or update schema."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors) or "Invalid request")
        self.errors = list(errors)

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status_code, "errors": self.errors}


class ImmutableFieldError(BooksAPIError):
    """Update payload tries to change a field that is fixed at creation."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str) -> None:
        super().__init__("Not Allowed")
        self.field = field


class NotFoundError(BooksAPIError):
    status_code = status.HTTP_404_NOT_FOUND


class StoreError(BooksAPIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ConflictError(StoreError):
    pass
