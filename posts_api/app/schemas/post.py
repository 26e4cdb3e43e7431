"""
Pydantic models for post data.

``PostBase`` holds the fields a client sends; ``PostCreate`` and
``PostUpdate`` are the request bodies and ``PostRead`` adds the
generated id and timestamps for responses.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class PostBase(BaseModel):
    title: str = Field(..., examples=["Hello"])
    content: str = Field(..., examples=["World"])


class PostCreate(PostBase):
    """Schema for creating a post."""
    pass


class PostUpdate(PostBase):
    """Schema for updating a post.

    Both fields are required; an update always replaces title and
    content together.
    """
    pass


class PostRead(PostBase):
    """Schema for reading a post from the API."""

    id: int
    created_at: datetime
    updated_at: datetime

    # Build directly from ``models.Post`` dataclass instances
    model_config = {
        "from_attributes": True,
    }
