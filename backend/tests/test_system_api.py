from library_api.core.config import Settings
from library_api.main import create_app


def test_ping(client):
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.json() == {"message": "pong"}


def test_hello(client):
    assert client.get("/hello").json() == {"message": "Hello, World!"}


def test_hello_with_payload(client):
    response = client.request("GET", "/helloWithPayload", json={"name": "Ada", "surname": "Lovelace"})
    assert response.status_code == 200
    assert response.json() == {"message": "Hello, Ada Lovelace!"}


def test_hello_with_payload_requires_body(client):
    assert client.request("GET", "/helloWithPayload", json={"name": "Ada"}).status_code == 422


def test_docs_enabled_outside_production(client):
    assert client.get("/docs").status_code == 200
    schema = client.get("/openapi.json").json()
    assert schema["info"]["title"] == "Book Library API"
    assert "/api/v1/books/{book_id}/reviews" in schema["paths"]


def test_docs_hidden_in_production(tmp_path):
    settings = Settings(
        _env_file=None,
        environment="production",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'prod.db'}",
    )
    app = create_app(settings)
    assert app.docs_url is None
    assert app.redoc_url is None
