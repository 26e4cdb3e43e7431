"""
Record stores for posts.

``PostStore`` describes the capability the service layer relies on.
``SQLitePostStore`` is the durable implementation used by the API;
``InMemoryPostStore`` keeps records in process memory and is handy for
tests and throwaway runs.
"""

from .base import Clock, PostStore
from .memory import InMemoryPostStore
from .sqlite import SQLitePostStore

__all__ = ["Clock", "PostStore", "InMemoryPostStore", "SQLitePostStore"]
