"""In-process record store."""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from ..core.exceptions import PostNotFoundError
from ..models.post import Post, utc_now
from .base import Clock, next_updated_at


class InMemoryPostStore:
    """Keeps posts in a dict keyed by id.

    Ids start at 1 and are never reused, even after a delete.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._posts: Dict[int, Post] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self) -> Post:
        return Post()

    def save(self, post: Post) -> Post:
        with self._lock:
            now = self._clock()
            if post.is_new:
                post.id = self._next_id
                self._next_id += 1
                post.created_at = now
                post.updated_at = now
            else:
                stored = self._posts.get(post.id)
                if stored is None:
                    raise PostNotFoundError(post.id)
                post.created_at = stored.created_at
                post.updated_at = next_updated_at(now, stored.updated_at)
            self._posts[post.id] = replace(post)
            return post

    def find_all(self) -> List[Post]:
        with self._lock:
            return [replace(self._posts[post_id]) for post_id in sorted(self._posts)]

    def find_by_id(self, post_id: int) -> Optional[Post]:
        with self._lock:
            stored = self._posts.get(post_id)
            return replace(stored) if stored is not None else None

    def find_by_id_or_fail(self, post_id: int) -> Post:
        post = self.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def delete_by_id(self, post_id: int) -> None:
        with self._lock:
            self._posts.pop(post_id, None)
