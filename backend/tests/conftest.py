"""Pytest configuration and fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from library_api.core.config import Settings
from library_api.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        _env_file=None,
        environment="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'library.db'}",
        db_init_retries=1,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_author(client):
    def _make_author(name: str = "Ursula K. Le Guin", **fields) -> dict:
        response = client.post("/api/v1/authors", json={"name": name, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    return _make_author


@pytest.fixture
def make_book(client, make_author):
    counter = {"n": 0}

    def _make_book(author_id: int | None = None, **fields) -> dict:
        if author_id is None:
            author_id = make_author()["id"]
        counter["n"] += 1
        payload = {
            "title": f"Book {counter['n']}",
            "isbn": f"978-0-00-{counter['n']:06d}",
            "author_id": author_id,
            **fields,
        }
        response = client.post("/api/v1/books", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_book
