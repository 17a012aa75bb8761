"""Tests for book and reading endpoints."""
from httpx import AsyncClient


async def _create_book(client: AsyncClient, **overrides: object) -> dict:
    payload = {"title": "Dune", "author": "Frank Herbert", "isbn": "9780441172719"}
    payload.update(overrides)
    response = await client.post("/books/", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_and_get_book(client: AsyncClient) -> None:
    created = await _create_book(client, published_date="1965-08-01", page_count=412)

    response = await client.get(f"/books/{created['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["published_date"] == "1965-08-01"
    assert data["page_count"] == 412


async def test_create_book_duplicate_isbn_conflict(client: AsyncClient) -> None:
    await _create_book(client)

    response = await client.post(
        "/books/", json={"title": "Copy", "author": "Someone", "isbn": "9780441172719"},
    )

    assert response.status_code == 409


async def test_create_book_validation(client: AsyncClient) -> None:
    response = await client.post("/books/", json={"title": "", "author": "A"})
    assert response.status_code == 422

    response = await client.post("/books/", json={"title": "T", "author": "A", "page_count": -1})
    assert response.status_code == 422


async def test_update_book(client: AsyncClient) -> None:
    created = await _create_book(client)

    response = await client.put(
        f"/books/{created['id']}",
        json={"title": "Dune", "author": "Frank Herbert", "genre": "Science Fiction"},
    )

    assert response.status_code == 200
    assert response.json()["genre"] == "Science Fiction"


async def test_update_missing_book(client: AsyncClient) -> None:
    response = await client.put("/books/12345", json={"title": "T", "author": "A"})
    assert response.status_code == 404


async def test_delete_book(client: AsyncClient) -> None:
    created = await _create_book(client)

    assert (await client.delete(f"/books/{created['id']}")).status_code == 204
    assert (await client.delete(f"/books/{created['id']}")).status_code == 404


async def test_search_books(client: AsyncClient) -> None:
    await _create_book(client)
    await _create_book(client, title="Emma", author="Jane Austen", isbn="2")

    response = await client.get("/books/search", params={"q": "Austen"})

    assert [b["title"] for b in response.json()] == ["Emma"]
    assert (await client.get("/books/search", params={"q": ""})).status_code == 400


async def test_reading_lifecycle(client: AsyncClient) -> None:
    book = await _create_book(client)

    response = await client.post(
        f"/books/{book['id']}/readings",
        json={"user_id": "reader-1", "start_date": "2024-01-01T00:00:00Z"},
    )
    assert response.status_code == 201
    reading = response.json()
    assert reading["status"] == "not_started"

    response = await client.put(
        f"/readings/{reading['id']}",
        json={
            "user_id": "reader-1",
            "start_date": "2024-01-01T00:00:00Z",
            "end_date": "2024-02-01T00:00:00Z",
            "status": "completed",
            "current_page": 412,
            "rating": 4,
        },
    )
    assert response.status_code == 200
    assert response.json()["status"] == "completed"

    response = await client.get(f"/books/{book['id']}/readings")
    assert [r["id"] for r in response.json()] == [reading["id"]]

    assert (await client.delete(f"/readings/{reading['id']}")).status_code == 204
    assert (await client.get(f"/readings/{reading['id']}")).status_code == 404


async def test_reading_for_missing_book(client: AsyncClient) -> None:
    response = await client.post(
        "/books/12345/readings",
        json={"user_id": "reader-1", "start_date": "2024-01-01T00:00:00Z"},
    )
    assert response.status_code == 404


async def test_reading_validation(client: AsyncClient) -> None:
    book = await _create_book(client)

    response = await client.post(
        f"/books/{book['id']}/readings",
        json={
            "user_id": "reader-1",
            "start_date": "2024-02-01T00:00:00Z",
            "end_date": "2024-01-01T00:00:00Z",
        },
    )
    assert response.status_code == 422

    response = await client.post(
        f"/books/{book['id']}/readings",
        json={"user_id": "reader-1", "start_date": "2024-01-01T00:00:00Z", "rating": 6},
    )
    assert response.status_code == 422
