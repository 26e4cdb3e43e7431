"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works
against a record store handed to it at construction, so API handlers
never talk to the database directly.
"""

from .post_service import PostService

__all__ = ["PostService"]
