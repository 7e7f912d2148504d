"""
Request validators and accessor lookup for the user routes.

Each validator is a FastAPI dependency that either returns the value
the handler needs (the resolved user, a trimmed ``name`` or ``text``)
or raises ``RequestRejected``, which ends the request with a 4xx
response before the handler runs.  FastAPI resolves dependencies in
the order they are declared on the endpoint, so declaring
``validate_user_id`` first makes an unknown id win over a bad body.

The validators read the raw JSON body instead of declaring a Pydantic
model, so that a missing field produces the API's own 400 message
rather than FastAPI's 422 validation report.
"""

import logging
from typing import Any

from fastapi import Body, Depends, Request, status

from blog_api.app.core.errors import RequestRejected
from blog_api.app.schemas.user import UserRead


logger = logging.getLogger(__name__)

USER_NOT_FOUND = "user not found"


def get_user_store(request: Request):
    """Return the user accessor injected into the application."""
    return request.app.state.user_store


def get_post_store(request: Request):
    """Return the post accessor injected into the application."""
    return request.app.state.post_store


def is_user_id(value: str) -> bool:
    """True for plain ASCII decimal ids.

    ``int()`` also accepts ``"1_0"``, ``" 10"`` and non-ASCII digits such
    as ``"١٠"``; those must not alias another user's id.
    """
    return value.isascii() and value.isdigit()


async def validate_user_id(user_id: str, users=Depends(get_user_store)) -> UserRead:
    """Resolve the ``{user_id}`` path parameter to a stored user.

    A failing lookup (malformed id, storage error) is answered exactly
    like an unknown id.
    """
    if not is_user_id(user_id):
        raise RequestRejected(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    try:
        user = await users.get_by_id(user_id)
    except Exception:
        logger.debug("Lookup of user %r failed", user_id, exc_info=True)
        user = None
    if user is None:
        raise RequestRejected(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    return user


def required_text(payload: Any, field: str) -> str:
    """Return ``payload[field]`` trimmed, or reject the request."""
    value = payload.get(field) if isinstance(payload, dict) else None
    if not isinstance(value, str) or not value.strip():
        raise RequestRejected(status.HTTP_400_BAD_REQUEST, f"missing required {field} field")
    return value.strip()


async def validate_user(payload: Any = Body(None)) -> str:
    """Validate the body of a user create/update request."""
    return required_text(payload, "name")


async def validate_post(payload: Any = Body(None)) -> str:
    """Validate the body of a post create request."""
    return required_text(payload, "text")
