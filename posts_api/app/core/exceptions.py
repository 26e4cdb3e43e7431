"""
Error types raised by the posts service and its record stores.

Only the "not found" condition has its own type.  Failures coming from
the persistence layer (``sqlite3.Error`` and friends) are propagated
unmodified and are not wrapped here.
"""


class PostsError(Exception):
    """Base class for errors raised by this package."""


class PostNotFoundError(PostsError, LookupError):
    """Raised when an operation requires a post that does not exist."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id
