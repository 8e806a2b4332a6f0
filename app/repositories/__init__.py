"""
Repositories Package

Repositories own all SQL for a resource. Routers receive them through
dependency injection (see app.dependencies), so tests can swap in a fake.
"""

from app.repositories.book import BookRepository

__all__ = ["BookRepository"]
