def test_create_author(client):
    response = client.post(
        "/api/v1/authors",
        json={"name": "Italo Calvino", "biography": "Italian writer", "birth_date": "1923-10-15"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] > 0
    assert body["name"] == "Italo Calvino"
    assert body["biography"] == "Italian writer"
    assert body["birth_date"] == "1923-10-15"
    assert body["books"] == []
    assert "created_at" in body and "updated_at" in body


def test_create_author_requires_name(client):
    assert client.post("/api/v1/authors", json={"biography": "nameless"}).status_code == 422
    assert client.post("/api/v1/authors", json={"name": ""}).status_code == 422


def test_get_author_includes_books(client, make_author, make_book):
    author = make_author("Jorge Luis Borges")
    make_book(author["id"], title="Ficciones")
    make_book(author["id"], title="El Aleph")

    response = client.get(f"/api/v1/authors/{author['id']}")

    assert response.status_code == 200
    assert [book["title"] for book in response.json()["books"]] == ["Ficciones", "El Aleph"]


def test_get_missing_author(client):
    response = client.get("/api/v1/authors/999")
    assert response.status_code == 404
    assert response.json() == {"detail": "author not found"}


def test_update_author(client, make_author):
    author = make_author("Octavia Butler")

    response = client.put(
        f"/api/v1/authors/{author['id']}",
        json={"name": "Octavia E. Butler", "biography": "Science fiction"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Octavia E. Butler"
    assert body["biography"] == "Science fiction"
    assert body["birth_date"] is None
    assert client.get(f"/api/v1/authors/{author['id']}").json()["name"] == "Octavia E. Butler"


def test_update_missing_author(client):
    response = client.put("/api/v1/authors/42", json={"name": "Nobody"})
    assert response.status_code == 404


def test_delete_author_hides_it(client, make_author):
    author = make_author("Temporary")

    response = client.delete(f"/api/v1/authors/{author['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "author deleted successfully"}
    assert client.get(f"/api/v1/authors/{author['id']}").status_code == 404
    assert client.delete(f"/api/v1/authors/{author['id']}").status_code == 404
    assert client.get("/api/v1/authors").json()["pagination"]["total_records"] == 0


def test_list_authors_paginates(client, make_author):
    for i in range(25):
        make_author(f"Author {i:02d}")

    first = client.get("/api/v1/authors").json()
    assert len(first["data"]) == 10
    assert first["data"][0]["name"] == "Author 00"
    assert first["pagination"] == {
        "total_records": 25,
        "total_pages": 3,
        "page": 1,
        "page_size": 10,
        "has_more": True,
    }

    last = client.get("/api/v1/authors", params={"page": 3, "page_size": 10}).json()
    assert [a["name"] for a in last["data"]] == [f"Author {i:02d}" for i in range(20, 25)]
    assert last["pagination"]["has_more"] is False


def test_list_authors_ignores_malformed_pagination(client, make_author):
    make_author("Solo")

    response = client.get("/api/v1/authors", params={"page": "abc", "page_size": "-5"})

    assert response.status_code == 200
    pagination = response.json()["pagination"]
    assert pagination["page"] == 1
    assert pagination["page_size"] == 10


def test_list_authors_clamps_page_size(client):
    response = client.get("/api/v1/authors", params={"page_size": "1000"})
    assert response.json()["pagination"] == {
        "total_records": 0,
        "total_pages": 0,
        "page": 1,
        "page_size": 100,
        "has_more": False,
    }


def test_list_authors_beyond_last_page_is_empty(client, make_author):
    make_author("Only one")

    body = client.get("/api/v1/authors", params={"page": 5}).json()

    assert body["data"] == []
    assert body["pagination"]["total_records"] == 1
    assert body["pagination"]["has_more"] is False


def test_list_authors_with_overflowing_page(client, make_author):
    make_author("Overflow")

    response = client.get("/api/v1/authors", params={"page": "99999999999999999999"})

    assert response.status_code == 200
    body = response.json()
    assert [a["name"] for a in body["data"]] == ["Overflow"]
    assert body["pagination"]["page"] == 1
