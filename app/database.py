"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Books API.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. The book repository uses that session for its statements
3. The repository commits its own writes (rolls back on integrity errors)
4. Session is closed when the request ends

This is implemented using FastAPI's dependency injection (see get_db).
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import Settings, get_settings

settings = get_settings()


def engine_options(config: Settings) -> dict[str, Any]:
    """
    Build create_engine() keyword arguments for the configured database.

    Pool sizing only applies to server databases; SQLite's default pools
    don't accept max_overflow.
    """
    options: dict[str, Any] = {"echo": config.debug}
    if config.is_sqlite:
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_pre_ping=True,  # Verify connections are alive before using
        )
    return options


# =============================================================================
# Database Engine
# =============================================================================
engine = create_engine(settings.database_url, **engine_options(settings))


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields a new session for the duration of a request and closes it
    afterwards, even if the handler raised.

    Usage in Routes:
        @router.get("/books/")
        def list_books(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def check_connection(bind: Engine | None = None) -> bool:
    """Return True if a trivial query succeeds against the database."""
    try:
        with (bind or engine).connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError:
        return False
    return True


def create_tables(bind: Engine | None = None) -> None:
    """
    Create all database tables.

    Handy for development and the seed script. In production, use
    Alembic migrations instead.
    """
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Used by `seed_data.py --reset`.
    """
    Base.metadata.drop_all(bind=bind or engine)
