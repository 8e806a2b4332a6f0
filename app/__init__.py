"""
Books API Application Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine and session management
- main.py: FastAPI application factory, exception handlers
- dependencies.py: Dependency injection functions
- exceptions.py: Typed API errors
- validation.py: Payload validation against the request schemas
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: SQL access per resource
- routers/: API route handlers
"""

__version__ = "1.0.0"
