#!/usr/bin/env python3
"""
Database Seed Script

Populates the books table with sample data for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

    # Keep existing rows (duplicate ISBNs are skipped)
    python scripts/seed_data.py --keep

    # Drop and recreate the schema before seeding
    python scripts/seed_data.py --reset

This script:
1. Connects to the database using app settings (DATABASE_URL)
2. Creates the books table if it doesn't exist (drops it first with --reset)
3. Clears existing books (unless --keep)
4. Inserts sample books through the BookRepository
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.database import SessionLocal, create_tables, drop_tables
from app.exceptions import ConflictError
from app.models import Book
from app.repositories import BookRepository

logger = logging.getLogger("seed_data")

SAMPLE_BOOKS = [
    {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
        "year": 2017,
    },
    {
        "isbn": "0451524934",
        "amazon_url": "https://www.amazon.com/dp/0451524934",
        "author": "George Orwell",
        "language": "english",
        "pages": 328,
        "publisher": "Signet Classic",
        "title": "1984",
        "year": 1961,
    },
    {
        "isbn": "0141439513",
        "amazon_url": "https://www.amazon.com/dp/0141439513",
        "author": "Jane Austen",
        "language": "english",
        "pages": 480,
        "publisher": "Penguin Classics",
        "title": "Pride and Prejudice",
        "year": 2002,
    },
    {
        "isbn": "0547928227",
        "amazon_url": "https://www.amazon.com/dp/0547928227",
        "author": "J.R.R. Tolkien",
        "language": "english",
        "pages": 300,
        "publisher": "William Morrow Paperbacks",
        "title": "The Hobbit",
        "year": 2012,
    },
    {
        "isbn": "8420412147",
        "amazon_url": "https://www.amazon.com/dp/8420412147",
        "author": "Gabriel García Márquez",
        "language": "spanish",
        "pages": 496,
        "publisher": "Alfaguara",
        "title": "Cien años de soledad",
        "year": 2014,
    },
]


def clear_books(db: Session) -> None:
    """Delete every row from the books table."""
    logger.info("Clearing existing books...")
    db.execute(delete(Book))
    db.commit()


def create_books(repository: BookRepository) -> list[Book]:
    """Insert the sample books, skipping ISBNs that already exist."""
    books = []
    for fields in SAMPLE_BOOKS:
        try:
            books.append(repository.create(fields))
        except ConflictError:
            logger.warning(f"Skipping {fields['isbn']}: already in the database")
    return books


def seed_database(clear_existing: bool = True, reset: bool = False) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing books before seeding.
        reset: If True, drops and recreates every table first.
    """
    if reset:
        logger.info("Dropping all tables...")
        drop_tables()
    create_tables()

    db = SessionLocal()
    try:
        if clear_existing and not reset:
            clear_books(db)

        books = create_books(BookRepository(db))
        logger.info(f"Database seeding completed: {len(books)} books created.")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the books table with sample data.")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="keep existing books instead of clearing the table first",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop and recreate all tables before seeding",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    seed_database(clear_existing=not args.keep, reset=args.reset)


if __name__ == "__main__":
    main()
