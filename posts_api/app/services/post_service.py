"""
Service layer for posts.

``PostService`` exposes the create/list/get/update/delete lifecycle of
posts.  It holds no state of its own besides the record store passed
to its constructor, so any number of instances can share one store.

Reads of a missing post return ``None``; updating a missing post raises
:class:`PostNotFoundError`; deleting a missing post does nothing.
Errors from the store itself are propagated untouched.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models.post import Post
from ..repositories.base import PostStore

logger = logging.getLogger(__name__)


class PostService:
    """Service class for managing posts."""

    def __init__(self, store: PostStore) -> None:
        self._store = store

    async def create(self, title: str, content: str) -> Post:
        """Create a post and return it with its generated id and timestamps."""
        post = self._store.create()
        post.title = title
        post.content = content
        self._store.save(post)
        logger.info("Created post %s", post.id)
        return post

    async def list_all(self) -> List[Post]:
        """Return every stored post in id order."""
        return self._store.find_all()

    async def find_one(self, post_id: int) -> Optional[Post]:
        """Return a single post, or ``None`` if it does not exist."""
        return self._store.find_by_id(post_id)

    async def update(self, post_id: int, title: str, content: str) -> Post:
        """Overwrite title and content of an existing post.

        Raises :class:`PostNotFoundError` if there is no post with
        ``post_id``; nothing is written in that case.
        """
        post = self._store.find_by_id_or_fail(post_id)
        post.title = title
        post.content = content
        self._store.save(post)
        logger.info("Updated post %s", post_id)
        return post

    async def remove(self, post_id: int) -> None:
        """Delete a post.  Deleting a missing post is not an error."""
        self._store.delete_by_id(post_id)
        logger.info("Delete requested for post %s", post_id)
