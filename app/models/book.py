"""
Book Model

The only table of the Books API.

The ISBN is the natural primary key: it identifies a book uniquely and is
never changed once the row exists. Every column is NOT NULL because the
create schema requires all fields.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields:
    - isbn: International Standard Book Number (primary key)
    - amazon_url: Link to the book's Amazon page
    - author: Author name
    - language: Language the book is written in
    - pages: Number of pages (positive)
    - publisher: Publisher name
    - title: Book title
    - year: Publication year

    Example:
        book = Book(
            isbn="0691161518",
            amazon_url="http://a.co/eobPtX2",
            author="Matthew Lane",
            language="english",
            pages=264,
            publisher="Princeton University Press",
            title="Power-Up: Unlocking the Hidden Mathematics in Video Games",
            year=2017,
        )
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    isbn: Mapped[str] = mapped_column(
        Text,
        primary_key=True,
        comment="International Standard Book Number",
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    amazon_url: Mapped[str] = mapped_column(Text, nullable=False)

    author: Mapped[str] = mapped_column(
        Text,
        index=True,
        nullable=False,
    )

    language: Mapped[str] = mapped_column(Text, nullable=False)

    pages: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of pages in the book",
    )

    publisher: Mapped[str] = mapped_column(Text, nullable=False)

    title: Mapped[str] = mapped_column(
        Text,
        index=True,
        nullable=False,
    )

    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Publication year",
    )

    def __repr__(self) -> str:
        return f"Book(isbn='{self.isbn}', title='{self.title}')"


# Columns a client may filter GET /books/ on (exact match).
FILTERABLE_COLUMNS = ("author", "language", "pages", "publisher", "title", "year")
