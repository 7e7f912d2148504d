"""
User and user‑post endpoints.

Routes that take a ``{user_id}`` resolve it through
``validate_user_id`` before the handler runs; routes with a body check
it through ``validate_user`` or ``validate_post``.  Handlers only talk
to the injected persistence accessors.  Anything they raise is turned
into the uniform error body by the handlers in ``core.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from blog_api.app.api.dependencies import (
    USER_NOT_FOUND,
    get_post_store,
    get_user_store,
    validate_post,
    validate_user,
    validate_user_id,
)
from blog_api.app.core.errors import APIError
from blog_api.app.schemas.post import PostCreate, PostRead, UserPostRead
from blog_api.app.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(users=Depends(get_user_store)) -> List[UserRead]:
    """Return all users."""
    return await users.list_all()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user: UserRead = Depends(validate_user_id)) -> UserRead:
    """Return a single user; 404 if the id does not resolve."""
    return user


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    name: str = Depends(validate_user),
    users=Depends(get_user_store),
) -> UserRead:
    """Create a user from the trimmed ``name`` and return it."""
    return await users.insert(UserCreate(name=name))


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user: UserRead = Depends(validate_user_id),
    name: str = Depends(validate_user),
    users=Depends(get_user_store),
) -> UserRead:
    """Rename a user and return the record as stored afterwards.

    The update and the re‑read are separate calls; if the user is
    deleted in between the request fails through the error responder.
    """
    await users.update(user.id, UserUpdate(name=name))
    updated = await users.get_by_id(user.id)
    if updated is None:
        raise APIError(USER_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    return updated


@router.delete("/{user_id}", response_model=UserRead)
async def delete_user(
    user: UserRead = Depends(validate_user_id),
    users=Depends(get_user_store),
) -> UserRead:
    """Delete a user and return the record as it was before deletion."""
    await users.remove(user.id)
    return user


@router.get("/{user_id}/posts", response_model=List[UserPostRead])
async def list_user_posts(
    user: UserRead = Depends(validate_user_id),
    users=Depends(get_user_store),
) -> List[UserPostRead]:
    """Return the posts written by a user."""
    return await users.get_posts_for_user(user.id)


@router.post("/{user_id}/posts", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_user_post(
    user: UserRead = Depends(validate_user_id),
    text: str = Depends(validate_post),
    posts=Depends(get_post_store),
) -> PostRead:
    """Create a post owned by the resolved user."""
    return await posts.insert(PostCreate(user_id=user.id, text=text))
