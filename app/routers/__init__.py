"""
API Routers Package

Import routers here for clean registration in main.py:

    from app.routers import books_router
    app.include_router(books_router)
"""

from app.routers.books import router as books_router

__all__ = ["books_router"]
