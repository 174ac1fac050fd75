"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from lending.config import Settings
from lending.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh SQLite file for each test."""
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'lending.db'}",
        DATABASE_CREATE_TABLES=True,
        ENVIRONMENT="test",
    )


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, Any, None]:
    """Create a test client; the lifespan creates the tables and disposes the engine."""
    app = create_app(settings)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_borrower(client: TestClient):
    def _register(name: str = "Ada Lovelace", email: str = "ada@example.com") -> dict[str, Any]:
        response = client.post("/api/v1/borrowers", json={"name": name, "email": email})
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def register_book(client: TestClient):
    def _register(
        isbn: str = "978-0-13-468599-1",
        title: str = "Effective Java",
        author: str = "Joshua Bloch",
    ) -> dict[str, Any]:
        response = client.post(
            "/api/v1/books", json={"isbn": isbn, "title": title, "author": author}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register
