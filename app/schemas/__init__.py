"""
Pydantic Schemas Package

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from app.schemas.book import (
    BookCreate,
    BookDetailResponse,
    BookListResponse,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    MessageResponse,
)

__all__ = [
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookDetailResponse",
    "BookListResponse",
    "MessageResponse",
    "ErrorResponse",
]
