"""
Pydantic schema definitions for API payloads.

Schemas are separated from the record types in ``models`` to decouple
the API representation from persistence.
"""

from .post import PostCreate, PostRead, PostUpdate

__all__ = ["PostCreate", "PostRead", "PostUpdate"]
