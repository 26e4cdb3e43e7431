"""Tests for the /api/v1/posts routes."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from posts_api.app.core.config import settings
from posts_api.app.main import create_app
from posts_api.app.repositories import InMemoryPostStore, SQLitePostStore

from .conftest import FakeClock

BASE = "/api/v1/posts"


# --- Test Setup ---


@pytest.fixture
def app() -> FastAPI:
    """Application backed by an in-memory store."""
    return create_app(store=InMemoryPostStore(clock=FakeClock()))


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def create(client: TestClient, title: str = "Hello", content: str = "World") -> dict:
    response = client.post(f"{BASE}/", json={"title": title, "content": content})
    assert response.status_code == 201
    return response.json()


# --- Tests ---


def test_create_post(client: TestClient) -> None:
    body = create(client)

    assert body["id"] == 1
    assert body["title"] == "Hello"
    assert body["content"] == "World"
    assert body["created_at"] == body["updated_at"]


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "Hello"},
        {"content": "World"},
        {"title": None, "content": "World"},
        {},
    ],
)
def test_create_post_rejects_incomplete_body(client: TestClient, payload: dict) -> None:
    response = client.post(f"{BASE}/", json=payload)

    assert response.status_code == 422
    assert client.get(f"{BASE}/").json() == []


def test_list_posts(client: TestClient) -> None:
    create(client, "A", "a")
    create(client, "B", "b")

    response = client.get(f"{BASE}/")

    assert response.status_code == 200
    assert [p["title"] for p in response.json()] == ["A", "B"]


def test_get_post(client: TestClient) -> None:
    created = create(client)

    response = client.get(f"{BASE}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_missing_post_returns_404(client: TestClient) -> None:
    response = client.get(f"{BASE}/5")

    assert response.status_code == 404
    assert response.json() == {"detail": "Post not found"}


def test_update_post(client: TestClient) -> None:
    created = create(client)

    response = client.put(f"{BASE}/{created['id']}", json={"title": "Hello2", "content": "World"})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["title"] == "Hello2"
    assert body["created_at"] == created["created_at"]
    assert body["updated_at"] != created["updated_at"]


def test_update_missing_post_returns_404(client: TestClient) -> None:
    response = client.put(f"{BASE}/5", json={"title": "x", "content": "y"})

    assert response.status_code == 404
    assert client.get(f"{BASE}/").json() == []


def test_update_requires_both_fields(client: TestClient) -> None:
    created = create(client)

    response = client.put(f"{BASE}/{created['id']}", json={"title": "only"})

    assert response.status_code == 422
    assert client.get(f"{BASE}/{created['id']}").json()["title"] == "Hello"


def test_delete_post_is_idempotent(client: TestClient) -> None:
    created = create(client)

    assert client.delete(f"{BASE}/{created['id']}").status_code == 204
    assert client.delete(f"{BASE}/{created['id']}").status_code == 204
    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_default_app_migrates_sqlite_on_startup(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "api.db"))

    with TestClient(create_app()) as client:
        created = create(client)
        assert client.get(f"{BASE}/{created['id']}").json()["title"] == "Hello"


def test_storage_failure_returns_500(tmp_path) -> None:
    app = create_app(store=SQLitePostStore(str(tmp_path / "unmigrated.db")))
    client = TestClient(app)

    response = client.get(f"{BASE}/")

    assert response.status_code == 500
    assert response.json() == {"detail": "Storage error"}


@pytest.mark.parametrize("post_id", ["0", "-1", "9223372036854775808"])
def test_out_of_range_post_ids_are_rejected(client: TestClient, post_id: str) -> None:
    assert client.get(f"{BASE}/{post_id}").status_code == 422
    assert client.put(f"{BASE}/{post_id}", json={"title": "x", "content": "y"}).status_code == 422
    assert client.delete(f"{BASE}/{post_id}").status_code == 422


def test_largest_post_id_is_a_plain_miss_on_sqlite(database_url: str) -> None:
    client = TestClient(create_app(store=SQLitePostStore(database_url)))

    assert client.get(f"{BASE}/9223372036854775807").status_code == 404
    assert client.delete(f"{BASE}/9223372036854775807").status_code == 204
