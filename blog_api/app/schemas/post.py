"""
Pydantic schemas for posts.

Posts belong to a user through ``user_id``.  When posts are listed for
a user the author's name is included as ``posted_by``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    """Record passed to ``PostStore.insert``."""

    user_id: int
    text: str = Field(..., min_length=1)


class PostUpdate(BaseModel):
    """Patch for an existing post.  Only provided values are updated."""

    text: Optional[str] = Field(None, min_length=1)
    user_id: Optional[int] = None


class PostRead(BaseModel):
    """Schema for reading a post."""

    id: int
    user_id: int
    text: str

    model_config = {
        "from_attributes": True,
    }


class UserPostRead(PostRead):
    """A post as listed under its author."""

    posted_by: str
