"""
Top‑level API router.

Aggregates domain routers under a common prefix.  Mounted by
``create_app`` at ``/api``, which puts the user routes at
``/api/users``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
