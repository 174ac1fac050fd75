"""Tests for catalog entry API endpoints."""

from fastapi.testclient import TestClient


def test_get_catalog_entry(client: TestClient, register_book) -> None:
    register_book()

    response = client.get("/api/v1/catalog-entries/978-0-13-468599-1")

    assert response.status_code == 200
    assert response.json() == {
        "isbn": "9780134685991",
        "title": "Effective Java",
        "author": "Joshua Bloch",
    }


def test_get_catalog_entry_not_found(client: TestClient) -> None:
    response = client.get("/api/v1/catalog-entries/9780134685991")

    assert response.status_code == 404
    assert response.json()["message"] == "Catalog entry with ISBN '9780134685991' was not found"


def test_get_catalog_entry_invalid_isbn(client: TestClient) -> None:
    response = client.get("/api/v1/catalog-entries/abc")
    assert response.status_code == 400


def test_update_catalog_entry_applies_to_all_copies(client: TestClient, register_book) -> None:
    register_book()
    register_book()

    response = client.put(
        "/api/v1/catalog-entries/9780134685991",
        json={"title": "Effective Java, Third Edition", "author": "Joshua Bloch"},
    )

    assert response.status_code == 200
    assert response.json()["title"] == "Effective Java, Third Edition"
    titles = {book["catalog_entry"]["title"] for book in client.get("/api/v1/books").json()}
    assert titles == {"Effective Java, Third Edition"}


def test_update_catalog_entry_blank_title(client: TestClient, register_book) -> None:
    register_book()

    response = client.put(
        "/api/v1/catalog-entries/9780134685991", json={"title": " ", "author": "Joshua Bloch"}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Title must not be empty"


def test_update_catalog_entry_not_found(client: TestClient) -> None:
    response = client.put(
        "/api/v1/catalog-entries/9780134685991", json={"title": "T", "author": "A"}
    )
    assert response.status_code == 404
