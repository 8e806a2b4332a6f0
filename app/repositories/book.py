"""
Book Repository

Translates the five book operations into SQL against the books table:

    find_all(filters)     SELECT ... WHERE col = :value ... ORDER BY title
    find_one(isbn)        SELECT ... WHERE isbn = :isbn
    create(fields)        INSERT INTO books ...
    update(isbn, fields)  UPDATE books SET ... WHERE isbn = :isbn
    remove(isbn)          DELETE FROM books WHERE isbn = :isbn

Statements are built with SQLAlchemy, so every value is sent as a bound
parameter. Each write commits its own unit of work; nothing spans
operations and nothing is retried.

A missing isbn raises NotFoundError. Integrity violations (duplicate isbn,
NOT NULL) raise ConflictError after rolling the session back. Any other
SQLAlchemyError propagates unchanged.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError
from app.models import FILTERABLE_COLUMNS, Book

logger = logging.getLogger(__name__)


def not_found(isbn: str) -> NotFoundError:
    return NotFoundError(f"There is no book with an isbn '{isbn}'")


class BookRepository:
    """Data access for books, bound to one request's session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_all(self, filters: Mapping[str, Any] | None = None) -> Sequence[Book]:
        """
        Return books matching every filter (exact match), ordered by title.

        Raises:
            ValueError: if a filter names something other than a book column
        """
        stmt = select(Book)
        for column, value in (filters or {}).items():
            if column not in FILTERABLE_COLUMNS:
                raise ValueError(f"Cannot filter books by '{column}'")
            stmt = stmt.where(getattr(Book, column) == value)
        stmt = stmt.order_by(Book.title)
        return self.db.execute(stmt).scalars().all()

    def find_one(self, isbn: str) -> Book:
        stmt = select(Book).where(Book.isbn == isbn)
        book = self.db.execute(stmt).scalar_one_or_none()
        if book is None:
            raise not_found(isbn)
        return book

    def create(self, fields: Mapping[str, Any]) -> Book:
        isbn = fields.get("isbn")
        with self._guard_integrity(f"Could not create book with isbn '{isbn}'"):
            self.db.execute(insert(Book).values(**fields))
            self.db.commit()
        logger.info("Created book %s", isbn)
        return self.find_one(isbn)

    def update(self, isbn: str, fields: Mapping[str, Any]) -> Book:
        """
        Apply only the supplied fields to the book with this isbn.

        An empty field set changes nothing and returns the current book.
        """
        if not fields:
            return self.find_one(isbn)

        stmt = update(Book).where(Book.isbn == isbn).values(**fields)
        with self._guard_integrity(f"Could not update book with isbn '{isbn}'"):
            result = self.db.execute(stmt)
            if result.rowcount == 0:
                self.db.rollback()
                raise not_found(isbn)
            self.db.commit()
        logger.info("Updated book %s (%s)", isbn, ", ".join(sorted(fields)))
        return self.find_one(isbn)

    def remove(self, isbn: str) -> None:
        result = self.db.execute(delete(Book).where(Book.isbn == isbn))
        if result.rowcount == 0:
            self.db.rollback()
            raise not_found(isbn)
        self.db.commit()
        logger.info("Deleted book %s", isbn)

    @contextmanager
    def _guard_integrity(self, message: str) -> Iterator[None]:
        """Turn integrity violations into ConflictError, leaving the session usable."""
        try:
            yield
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("%s: %s", message, exc.orig)
            raise ConflictError(message) from exc
