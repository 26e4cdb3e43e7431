"""
SQLite-backed record store.

Every operation opens its own connection through ``core.db``, commits
writes and closes the connection before returning.  All queries use
parameterized statements.  ``sqlite3`` errors are not caught here and
reach the caller unchanged.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from typing import List, Optional

from ..core.db import get_connection
from ..core.exceptions import PostNotFoundError
from ..models.post import Post, is_valid_post_id, utc_now
from .base import Clock, next_updated_at

logger = logging.getLogger(__name__)


class SQLitePostStore:
    """Stores posts in the ``posts`` table.

    Parameters
    ----------
    database_url : Optional[str]
        Database file passed to :func:`get_connection`.  Defaults to
        ``settings.database_url``.  The schema must already exist; call
        :func:`init_db` first.
    clock : Clock
        Source of timestamps for ``created_at``/``updated_at``.
    """

    def __init__(self, database_url: Optional[str] = None, clock: Clock = utc_now) -> None:
        self.database_url = database_url
        self._clock = clock

    def create(self) -> Post:
        return Post()

    def save(self, post: Post) -> Post:
        conn = get_connection(self.database_url)
        try:
            cursor = conn.cursor()
            now = self._clock()
            if post.is_new:
                cursor.execute(
                    """
                    INSERT INTO posts (title, content, created_at, updated_at)
                    VALUES (?, ?, ?, ?)
                    """,
                    (post.title, post.content, now.isoformat(), now.isoformat()),
                )
                post.id = cursor.lastrowid
                post.created_at = now
                post.updated_at = now
            else:
                if not is_valid_post_id(post.id):
                    raise PostNotFoundError(post.id)
                row = cursor.execute(
                    "SELECT created_at, updated_at FROM posts WHERE id = ?",
                    (post.id,),
                ).fetchone()
                if row is None:
                    raise PostNotFoundError(post.id)
                updated_at = next_updated_at(now, _parse_timestamp(row["updated_at"]))
                cursor.execute(
                    "UPDATE posts SET title = ?, content = ?, updated_at = ? WHERE id = ?",
                    (post.title, post.content, updated_at.isoformat(), post.id),
                )
                if cursor.rowcount == 0:
                    # Deleted by another connection after the SELECT above.
                    raise PostNotFoundError(post.id)
                post.created_at = _parse_timestamp(row["created_at"])
                post.updated_at = updated_at
            conn.commit()
            return post
        finally:
            conn.close()

    def find_all(self) -> List[Post]:
        conn = get_connection(self.database_url)
        try:
            rows = conn.execute("SELECT * FROM posts ORDER BY id ASC").fetchall()
            return [self._row_to_post(row) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, post_id: int) -> Optional[Post]:
        if not is_valid_post_id(post_id):
            return None
        conn = get_connection(self.database_url)
        try:
            row = conn.execute("SELECT * FROM posts WHERE id = ?", (post_id,)).fetchone()
            if not row:
                return None
            return self._row_to_post(row)
        finally:
            conn.close()

    def find_by_id_or_fail(self, post_id: int) -> Post:
        post = self.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def delete_by_id(self, post_id: int) -> None:
        if not is_valid_post_id(post_id):
            logger.debug("Delete of out-of-range post id %s ignored", post_id)
            return
        conn = get_connection(self.database_url)
        try:
            cursor = conn.execute("DELETE FROM posts WHERE id = ?", (post_id,))
            conn.commit()
            if not cursor.rowcount:
                logger.debug("Delete of missing post %s ignored", post_id)
        finally:
            conn.close()

    @staticmethod
    def _row_to_post(row: sqlite3.Row) -> Post:
        """Convert a database row to a Post record."""
        return Post(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


def _parse_timestamp(value: str) -> datetime:
    # Rows written by SQLite's CURRENT_TIMESTAMP default carry no offset
    # but are UTC.
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
