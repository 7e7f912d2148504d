"""
Pydantic models for user data.

A user only has a generated ``id`` and a ``name``.  Request bodies are
checked by the validators in ``api.dependencies`` before these models
are built, so ``name`` is already trimmed and non‑empty here.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Record passed to ``UserStore.insert``."""

    name: str = Field(..., min_length=1, examples=["Frodo Baggins"])


class UserUpdate(BaseModel):
    """Patch passed to ``UserStore.update``; unset fields are left alone."""

    name: Optional[str] = Field(None, min_length=1)


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }
