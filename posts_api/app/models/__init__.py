"""
Plain record types.

Records carry data only; generated keys and timestamps are filled in by
the record stores in ``repositories``.
"""

from .post import MAX_POST_ID, MIN_POST_ID, Post, is_valid_post_id, utc_now

__all__ = ["MAX_POST_ID", "MIN_POST_ID", "Post", "is_valid_post_id", "utc_now"]
