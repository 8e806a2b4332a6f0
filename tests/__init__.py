"""
Test Suite for Books API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: /books endpoints against SQLite
- test_books_fake_repository.py: /books endpoints with an in-memory repository
- test_repository.py: BookRepository against SQLite
- test_validation.py: the payload validation gate
- test_app.py: health/root endpoints, error handlers, settings

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
