"""Tests for the HTTP layer."""

from collections.abc import AsyncGenerator

import httpx
import pytest

from tagdo.repositories import (
    LabelRepositoryForDb,
    LabelRepositoryForMemory,
    Repositories,
    TodoRepositoryForDb,
    TodoRepositoryForMemory,
    UnexpectedError,
)
from tagdo.server import create_app


async def _client(repositories: Repositories) -> httpx.AsyncClient:
    app = create_app(repositories)
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
async def client() -> AsyncGenerator[httpx.AsyncClient, None]:
    repositories = Repositories(
        todos=TodoRepositoryForMemory(), labels=LabelRepositoryForMemory()
    )
    async with await _client(repositories) as client:
        yield client


@pytest.fixture
async def sql_client(database) -> AsyncGenerator[httpx.AsyncClient, None]:
    repositories = Repositories(
        todos=TodoRepositoryForDb(database), labels=LabelRepositoryForDb(database)
    )
    async with await _client(repositories) as client:
        yield client


class TestHealth:
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestTodoRoutes:
    """Tests for /todos."""

    async def test_create(self, client):
        response = await client.post("/todos", json={"text": "should_return_created_todo"})
        assert response.status_code == 201
        assert response.json() == {
            "id": 1,
            "text": "should_return_created_todo",
            "completed": False,
            "labels": [],
        }

    async def test_find(self, client):
        await client.post("/todos", json={"text": "find me"})
        response = await client.get("/todos/1")
        assert response.status_code == 200
        assert response.json()["text"] == "find me"

    async def test_find_missing(self, client):
        response = await client.get("/todos/7")
        assert response.status_code == 404
        assert response.json()["id"] == 7

    async def test_all(self, client):
        await client.post("/todos", json={"text": "a"})
        await client.post("/todos", json={"text": "b"})
        response = await client.get("/todos")
        assert response.status_code == 200
        assert [todo["text"] for todo in response.json()] == ["a", "b"]

    async def test_all_empty(self, client):
        response = await client.get("/todos")
        assert response.status_code == 200
        assert response.json() == []

    async def test_update(self, client):
        await client.post("/todos", json={"text": "before"})
        response = await client.patch("/todos/1", json={"completed": True})
        assert response.status_code == 201
        assert response.json()["text"] == "before"
        assert response.json()["completed"] is True

    async def test_update_missing(self, client):
        response = await client.patch("/todos/1", json={"text": "x"})
        assert response.status_code == 404

    async def test_delete(self, client):
        await client.post("/todos", json={"text": "bye"})
        response = await client.delete("/todos/1")
        assert response.status_code == 204
        assert (await client.get("/todos/1")).status_code == 404

    async def test_delete_missing(self, client):
        response = await client.delete("/todos/1")
        assert response.status_code == 404

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"text": ""},
            {"text": "a" * 101},
        ],
    )
    async def test_create_validation(self, client, body):
        response = await client.post("/todos", json=body)
        assert response.status_code == 422

    async def test_create_max_length_ok(self, client):
        response = await client.post("/todos", json={"text": "a" * 100})
        assert response.status_code == 201

    async def test_update_validation(self, client):
        await client.post("/todos", json={"text": "ok"})
        response = await client.patch("/todos/1", json={"text": ""})
        assert response.status_code == 422


class TestLabelRoutes:
    """Tests for /labels."""

    async def test_create_and_all(self, client):
        response = await client.post("/labels", json={"name": "work"})
        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "work"}

        response = await client.get("/labels")
        assert response.json() == [{"id": 1, "name": "work"}]

    async def test_duplicate(self, client):
        await client.post("/labels", json={"name": "work"})
        response = await client.post("/labels", json={"name": "work"})
        assert response.status_code == 409
        assert response.json()["id"] == 1

    async def test_delete(self, client):
        await client.post("/labels", json={"name": "temp"})
        assert (await client.delete("/labels/1")).status_code == 204
        assert (await client.delete("/labels/1")).status_code == 404

    async def test_create_validation(self, client):
        response = await client.post("/labels", json={"name": ""})
        assert response.status_code == 422


class TestErrorMapping:
    """Unclassified repository errors become generic failures."""

    async def test_unexpected_error_is_500(self):
        class BrokenTodos(TodoRepositoryForMemory):
            async def all(self):
                raise UnexpectedError("connection refused")

        repositories = Repositories(
            todos=BrokenTodos(), labels=LabelRepositoryForMemory()
        )
        async with await _client(repositories) as client:
            response = await client.get("/todos")

        assert response.status_code == 500
        assert "connection refused" not in response.text


class TestSqlBackedRoutes:
    """Round trip through the SQL repositories."""

    async def test_crud_scenario(self, sql_client):
        created = (await sql_client.post("/todos", json={"text": "[crud_scenario] text"})).json()
        assert created["completed"] is False

        assert (await sql_client.get(f"/todos/{created['id']}")).json() == created
        assert (await sql_client.get("/todos")).json()[0] == created

        updated = (
            await sql_client.patch(
                f"/todos/{created['id']}",
                json={"text": "[crud_scenario] updated text", "completed": True},
            )
        ).json()
        assert updated["id"] == created["id"]
        assert updated["text"] == "[crud_scenario] updated text"

        assert (await sql_client.delete(f"/todos/{created['id']}")).status_code == 204
        assert (await sql_client.get(f"/todos/{created['id']}")).status_code == 404
