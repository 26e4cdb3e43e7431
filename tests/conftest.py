from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from posts_api.app.core.db import init_db
from posts_api.app.repositories import InMemoryPostStore, SQLitePostStore
from posts_api.app.services import PostService


class FakeClock:
    """Clock advancing by ``step`` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start or datetime(2025, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def database_url(tmp_path) -> str:
    """Path of a freshly migrated SQLite database."""
    db_path = str(tmp_path / "posts.db")
    init_db(db_path)
    return db_path


@pytest.fixture(params=["memory", "sqlite"])
def store(request, clock: FakeClock):
    """Each store implementation in turn."""
    if request.param == "memory":
        return InMemoryPostStore(clock=clock)
    db_path = str(request.getfixturevalue("tmp_path") / "posts.db")
    init_db(db_path)
    return SQLitePostStore(db_path, clock=clock)


@pytest.fixture
def service(store) -> PostService:
    return PostService(store)
