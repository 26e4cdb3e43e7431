"""Post record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


# Range of a SQLite INTEGER, and so of any id a store can hold.
MIN_POST_ID = -(2**63)
MAX_POST_ID = 2**63 - 1


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Post:
    """A single post.

    ``id``, ``created_at`` and ``updated_at`` stay ``None`` until the
    record is first saved by a store.
    """

    title: str = ""
    content: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_new(self) -> bool:
        return self.id is None


def is_valid_post_id(post_id: int) -> bool:
    """Return whether ``post_id`` fits the id range of the stores."""
    return MIN_POST_ID <= post_id <= MAX_POST_ID
