"""
SQLAlchemy Models Package

Import models here to:
1. Make them available as: from app.models import Book
2. Ensure Alembic discovers them for migrations
"""

from app.models.book import FILTERABLE_COLUMNS, Book

__all__ = [
    "Book",
    "FILTERABLE_COLUMNS",
]
