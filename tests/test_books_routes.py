import pytest
from fastapi.testclient import TestClient

from tests.conftest import TEST_USER

OTHER_USER = {
    "name": "Other User",
    "email": "other@example.com",
    "password": "password456",
}


def _create_book(client, book):
    response = client.post("/books", json=book)
    assert response.status_code == 201
    return response.json()["book"]


def test_create_book(authenticate):
    client, session = authenticate()
    book = {"title": "Test Book", "author": "Test Author", "genrer": "Test Genre"}

    response = client.post("/books", json=book)

    assert response.status_code == 201
    created = response.json()["book"]
    assert {k: created[k] for k in book} == book
    assert created["id"]
    assert created["user_id"] == session["user_id"]


def test_list_books(authenticate):
    client, _ = authenticate()
    book = {"title": "Test Book 2", "author": "Test Author 2", "genrer": "Test Genre 2"}
    created = _create_book(client, book)

    response = client.get("/books")

    assert response.status_code == 200
    books = response.json()["books"]
    assert len(books) == 1
    assert books[0]["id"] == created["id"]
    assert {k: books[0][k] for k in book} == book


def test_list_books_empty(authenticate):
    client, _ = authenticate()

    response = client.get("/books")

    assert response.status_code == 200
    assert response.json() == {"books": []}


def test_list_books_keeps_insertion_order(authenticate):
    client, _ = authenticate()
    titles = ["First", "Second", "Third"]
    for title in titles:
        _create_book(client, {"title": title, "author": "A", "genrer": "G"})

    books = client.get("/books").json()["books"]

    assert [b["title"] for b in books] == titles


def test_get_book(authenticate):
    client, _ = authenticate()
    book = {"title": "Test Book 2", "author": "Test Author 2", "genrer": "Test Genre 2"}
    _create_book(client, book)
    book_id = client.get("/books").json()["books"][0]["id"]

    response = client.get(f"/books/{book_id}")

    assert response.status_code == 200
    assert {k: response.json()["book"][k] for k in book} == book


@pytest.mark.parametrize("book_id", [
    "00000000-0000-0000-0000-000000000000",
    "not-a-uuid",
])
def test_get_missing_book_returns_404(authenticate, book_id):
    client, _ = authenticate()

    response = client.get(f"/books/{book_id}")

    assert response.status_code == 404


def test_edit_book(authenticate):
    client, session = authenticate()
    created = _create_book(
        client, {"title": "Test Book to Edit", "author": "Test Author", "genrer": "Test Genre"}
    )
    updated = {"title": "Updated Title", "author": "Updated Author", "genrer": "Updated Genre"}

    response = client.put(f"/books/{created['id']}", json=updated)

    assert response.status_code == 200
    body = response.json()["book"]
    assert {k: body[k] for k in updated} == updated
    assert body["id"] == created["id"]
    assert body["user_id"] == session["user_id"]

    fetched = client.get(f"/books/{created['id']}").json()["book"]
    assert {k: fetched[k] for k in updated} == updated


def test_delete_book(authenticate):
    client, _ = authenticate()
    created = _create_book(
        client, {"title": "Test Book to Delete", "author": "Delete Author", "genrer": "Delete Genre"}
    )

    response = client.delete(f"/books/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/books").json()["books"] == []


def test_deleted_book_is_gone(authenticate):
    client, _ = authenticate()
    created = _create_book(client, {"title": "T", "author": "A", "genrer": "G"})
    client.delete(f"/books/{created['id']}")

    payload = {"title": "T2", "author": "A2", "genrer": "G2"}
    assert client.get(f"/books/{created['id']}").status_code == 404
    assert client.put(f"/books/{created['id']}", json=payload).status_code == 404
    assert client.delete(f"/books/{created['id']}").status_code == 404


@pytest.mark.parametrize("payload", [
    {"author": "A", "genrer": "G"},
    {"title": "T", "genrer": "G"},
    {"title": "T", "author": "A"},
    {"title": "   ", "author": "A", "genrer": "G"},
    {"title": "T", "author": "A", "genre": "G"},
])
def test_create_book_rejects_malformed_body(authenticate, payload):
    client, _ = authenticate()

    response = client.post("/books", json=payload)

    assert response.status_code == 422
    assert client.get("/books").json()["books"] == []


def test_update_book_rejects_malformed_body(authenticate):
    client, _ = authenticate()
    created = _create_book(client, {"title": "T", "author": "A", "genrer": "G"})

    response = client.put(f"/books/{created['id']}", json={"title": "Only title"})

    assert response.status_code == 422
    assert client.get(f"/books/{created['id']}").json()["book"]["title"] == "T"


def test_list_books_without_cookie_returns_401(client):
    response = client.get("/books")

    assert response.status_code == 401


@pytest.mark.parametrize("method,path", [
    ("post", "/books"),
    ("get", "/books"),
    ("get", "/books/00000000-0000-0000-0000-000000000000"),
    ("put", "/books/00000000-0000-0000-0000-000000000000"),
    ("delete", "/books/00000000-0000-0000-0000-000000000000"),
])
def test_book_routes_require_session(client, method, path):
    body = {"title": "T", "author": "A", "genrer": "G"}
    kwargs = {"json": body} if method in ("post", "put") else {}

    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 401
    assert "book" not in response.json()
    assert "books" not in response.json()


def test_unauthenticated_create_has_no_side_effect(client, authenticate):
    response = client.post("/books", json={"title": "T", "author": "A", "genrer": "G"})
    assert response.status_code == 401

    owner, _ = authenticate()
    assert owner.get("/books").json()["books"] == []


def test_unauthenticated_update_and_delete_leave_book_intact(client, authenticate):
    owner, _ = authenticate()
    original = {"title": "Mine", "author": "Me", "genrer": "Memoir"}
    book_id = _create_book(owner, original)["id"]

    put = client.put(
        f"/books/{book_id}", json={"title": "X", "author": "X", "genrer": "X"}
    )
    delete = client.delete(f"/books/{book_id}")

    assert put.status_code == 401
    assert delete.status_code == 401
    fetched = owner.get(f"/books/{book_id}")
    assert fetched.status_code == 200
    assert {k: fetched.json()["book"][k] for k in original} == original


def test_unauthenticated_check_runs_before_body_validation(client):
    response = client.post("/books", json={})

    assert response.status_code == 401


def test_books_are_isolated_between_users(authenticate):
    alice, _ = authenticate(TEST_USER)
    bob, _ = authenticate(OTHER_USER)
    created = _create_book(alice, {"title": "Alice's", "author": "A", "genrer": "G"})
    book_id = created["id"]

    assert bob.get("/books").json()["books"] == []
    assert bob.get(f"/books/{book_id}").status_code == 404
    assert bob.put(
        f"/books/{book_id}", json={"title": "Hijacked", "author": "B", "genrer": "B"}
    ).status_code == 404
    assert bob.delete(f"/books/{book_id}").status_code == 404

    still_there = alice.get(f"/books/{book_id}")
    assert still_there.status_code == 200
    assert still_there.json()["book"]["title"] == "Alice's"


def test_not_owned_and_missing_book_look_the_same(authenticate):
    alice, _ = authenticate(TEST_USER)
    bob, _ = authenticate(OTHER_USER)
    created = _create_book(alice, {"title": "T", "author": "A", "genrer": "G"})

    not_owned = bob.get(f"/books/{created['id']}")
    missing = bob.get("/books/00000000-0000-0000-0000-000000000000")

    assert not_owned.status_code == missing.status_code == 404
    assert not_owned.json() == missing.json()


def test_bearer_token_is_accepted(app, authenticate):
    _, session = authenticate()
    api_client = TestClient(app)
    headers = {"Authorization": f"Bearer {session['access_token']}"}

    response = api_client.post(
        "/books", json={"title": "T", "author": "A", "genrer": "G"}, headers=headers
    )

    assert response.status_code == 201
    assert len(api_client.get("/books", headers=headers).json()["books"]) == 1
