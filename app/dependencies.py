"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle, and tests replace them
through app.dependency_overrides (e.g. an in-memory book repository instead
of the SQL one).
"""

from typing import Annotated, Any

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories import BookRepository

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
#
# You can write:
#   def list_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Repositories
# =============================================================================
def get_book_repository(db: DbSession) -> BookRepository:
    """Book repository bound to the request's database session."""
    return BookRepository(db)


BookRepo = Annotated[BookRepository, Depends(get_book_repository)]


# =============================================================================
# Book List Filters
# =============================================================================
class BookFilterParams:
    """
    Exact-match filters for GET /books/.

    Every parameter is optional; the ones provided are combined with AND.

    Usage:
        GET /books/?author=Matthew%20Lane
        GET /books/?language=english&year=2017
    """

    def __init__(
        self,
        author: str | None = Query(
            default=None,
            description="Filter by author name",
            examples=["Matthew Lane"],
        ),
        language: str | None = Query(
            default=None,
            description="Filter by language",
            examples=["english"],
        ),
        publisher: str | None = Query(
            default=None,
            description="Filter by publisher",
        ),
        title: str | None = Query(
            default=None,
            description="Filter by title",
        ),
        pages: int | None = Query(
            default=None,
            description="Filter by page count",
        ),
        year: int | None = Query(
            default=None,
            description="Filter by publication year",
            examples=[2017],
        ),
    ) -> None:
        self.author = author
        self.language = language
        self.publisher = publisher
        self.title = title
        self.pages = pages
        self.year = year

    def as_dict(self) -> dict[str, Any]:
        """Only the filters that were actually supplied."""
        return {
            column: value
            for column, value in vars(self).items()
            if value is not None
        }


BookFilters = Annotated[BookFilterParams, Depends()]
