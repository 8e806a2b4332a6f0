"""
pytest Fixtures for Books API Tests

Shared fixtures used across all test files.

For database tests we use:
- a fresh SQLite in-memory engine per test (tables created from the models)
- one session per test, injected into the app by overriding get_db
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app, so the
# application engine points at SQLite instead of PostgreSQL.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Book

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# StaticPool keeps a single connection alive, otherwise the SQLite
# in-memory database would disappear between connections.


@pytest.fixture
def engine():
    """Create a SQLite in-memory database with the books table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session for one test."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def book_data() -> dict:
    """A complete, valid create payload."""
    return {
        "isbn": "987654321",
        "amazon_url": "https://amazon.com/newbook",
        "author": "New Author",
        "language": "English",
        "pages": 300,
        "publisher": "New Publisher",
        "title": "A New Book",
        "year": 2022,
    }


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Insert one book directly into the table."""
    book = Book(
        isbn="123456789",
        amazon_url="https://amazon.com/fakebook",
        author="Fake Author",
        language="English",
        pages=200,
        publisher="Fake Publishers",
        title="A Fake Book",
        year=2024,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Insert a few books with overlapping authors and languages."""
    rows = [
        ("1111111111", "Zebra Stripes", "Ann Author", "English", 120, 2001),
        ("2222222222", "Apple Orchards", "Ann Author", "French", 340, 2010),
        ("3333333333", "Mountain Paths", "Bob Writer", "English", 210, 2010),
    ]
    books = [
        Book(
            isbn=isbn,
            amazon_url=f"https://amazon.com/{isbn}",
            author=author,
            language=language,
            pages=pages,
            publisher="Test Press",
            title=title,
            year=year,
        )
        for isbn, title, author, language, pages, year in rows
    ]
    db_session.add_all(books)
    db_session.commit()
    return books
