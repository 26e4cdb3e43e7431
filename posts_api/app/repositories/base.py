"""Record store protocol for posts."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional, Protocol

from ..models.post import Post

Clock = Callable[[], datetime]


class PostStore(Protocol):
    """Storage capability consumed by :class:`PostService`.

    Records returned by a store are copies; changes to them are only
    persisted by passing them back to :meth:`save`.
    """

    def create(self) -> Post:
        """Return a new, unsaved record."""
        ...

    def save(self, post: Post) -> Post:
        """Insert a new record or update an existing one.

        The first save assigns ``id``, ``created_at`` and ``updated_at``.
        Later saves refresh ``updated_at``.  Raises
        :class:`PostNotFoundError` when the record no longer exists.
        """
        ...

    def find_all(self) -> List[Post]:
        ...

    def find_by_id(self, post_id: int) -> Optional[Post]:
        ...

    def find_by_id_or_fail(self, post_id: int) -> Post:
        """Like :meth:`find_by_id` but raises :class:`PostNotFoundError`."""
        ...

    def delete_by_id(self, post_id: int) -> None:
        """Delete a record; a missing id is a no-op."""
        ...


def next_updated_at(now: datetime, previous: Optional[datetime]) -> datetime:
    """Return the refreshed ``updated_at`` value, never earlier than ``previous``."""
    if previous is not None and previous > now:
        return previous
    return now
