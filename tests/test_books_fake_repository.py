"""
Router tests with an in-memory repository.

The books router only talks to whatever get_book_repository returns, so
these tests swap in a dict-backed fake and exercise the HTTP layer without
any database.
"""

from collections.abc import Generator

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from app.dependencies import get_book_repository
from app.exceptions import ConflictError, NotFoundError
from app.main import app


class InMemoryBookRepository:
    """Dict-backed stand-in for BookRepository."""

    def __init__(self) -> None:
        self.books: dict[str, dict] = {}
        self.calls: list[str] = []

    def find_all(self, filters=None) -> list[dict]:
        self.calls.append("find_all")
        filters = filters or {}
        return sorted(
            (
                book for book in self.books.values()
                if all(book[column] == value for column, value in filters.items())
            ),
            key=lambda book: book["title"],
        )

    def find_one(self, isbn: str) -> dict:
        self.calls.append("find_one")
        if isbn not in self.books:
            raise NotFoundError(f"There is no book with an isbn '{isbn}'")
        return self.books[isbn]

    def create(self, fields) -> dict:
        self.calls.append("create")
        if fields["isbn"] in self.books:
            raise ConflictError(f"Could not create book with isbn '{fields['isbn']}'")
        self.books[fields["isbn"]] = dict(fields)
        return self.books[fields["isbn"]]

    def update(self, isbn: str, fields) -> dict:
        self.calls.append("update")
        if isbn not in self.books:
            raise NotFoundError(f"There is no book with an isbn '{isbn}'")
        self.books[isbn].update(fields)
        return self.books[isbn]

    def remove(self, isbn: str) -> None:
        self.calls.append("remove")
        if self.books.pop(isbn, None) is None:
            raise NotFoundError(f"There is no book with an isbn '{isbn}'")


@pytest.fixture
def repository() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture
def fake_client(repository) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_book_repository] = lambda: repository

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def stored_book(repository, book_data) -> dict:
    repository.books[book_data["isbn"]] = dict(book_data)
    repository.calls.clear()
    return repository.books[book_data["isbn"]]


def test_list_passes_filters_to_repository(fake_client, repository, stored_book):
    response = fake_client.get("/books/", params={"author": "New Author", "pages": 300})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["books"] == [stored_book]
    assert repository.calls == ["find_all"]


def test_create_stores_validated_fields(fake_client, repository, book_data):
    response = fake_client.post("/books/", json=book_data)

    assert response.status_code == status.HTTP_201_CREATED
    assert repository.books[book_data["isbn"]] == book_data


def test_invalid_create_never_reaches_repository(fake_client, repository):
    response = fake_client.post("/books/", json={"title": 42})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "instance.title is not of a type(s) string" in response.json()["errors"]
    assert repository.calls == []


def test_isbn_change_never_reaches_repository(fake_client, repository, stored_book):
    response = fake_client.put(f"/books/{stored_book['isbn']}", json={"isbn": "1"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"status": 400, "message": "Not Allowed"}
    assert repository.calls == []


def test_update_sends_only_supplied_fields(fake_client, repository, stored_book):
    response = fake_client.put(f"/books/{stored_book['isbn']}", json={"year": 1984})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["book"]["year"] == 1984
    assert response.json()["book"]["title"] == stored_book["title"]
    assert repository.calls == ["update"]


@pytest.mark.parametrize(
    "method,body",
    [("get", None), ("put", {"title": "x"}), ("delete", None)],
)
def test_unknown_isbn_is_404(fake_client, method, body):
    kwargs = {"json": body} if body is not None else {}

    response = fake_client.request(method.upper(), "/books/nope", **kwargs)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {
        "status": 404,
        "message": "There is no book with an isbn 'nope'",
    }


def test_conflict_is_reported_as_store_error(fake_client, stored_book, book_data):
    response = fake_client.post("/books/", json=book_data)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["status"] == 500


def test_delete_then_get(fake_client, stored_book):
    isbn = stored_book["isbn"]

    assert fake_client.delete(f"/books/{isbn}").json() == {"message": "Book deleted"}
    assert fake_client.get(f"/books/{isbn}").status_code == status.HTTP_404_NOT_FOUND
