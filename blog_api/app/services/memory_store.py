"""
In‑memory persistence accessors.

Same coroutine interface as ``UserStore``/``PostStore`` with rows kept
in dictionaries for the lifetime of the process.  Used by the test
suite and when ``STORE_BACKEND=memory``.  Ids are generated from a
counter and never reused, and removing a user removes their posts,
mirroring the SQLite schema.
"""

from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Optional

from blog_api.app.schemas.post import PostCreate, PostRead, PostUpdate, UserPostRead
from blog_api.app.schemas.user import UserCreate, UserRead, UserUpdate


logger = logging.getLogger(__name__)


class InMemoryPostStore:
    def __init__(self) -> None:
        self.rows: Dict[int, PostRead] = {}
        self._ids = itertools.count(1)

    async def list_all(self) -> List[PostRead]:
        return [self.rows[key] for key in sorted(self.rows)]

    async def get_by_id(self, post_id) -> Optional[PostRead]:
        return self.rows.get(int(post_id))

    async def insert(self, record: PostCreate) -> PostRead:
        post = PostRead(id=next(self._ids), user_id=record.user_id, text=record.text)
        self.rows[post.id] = post
        logger.info("Created post %s for user %s", post.id, post.user_id)
        return post

    async def update(self, post_id, patch: PostUpdate) -> int:
        current = self.rows.get(int(post_id))
        changes = patch.model_dump(exclude_unset=True)
        if current is None or not changes:
            return 0
        self.rows[current.id] = current.model_copy(update=changes)
        return 1

    async def remove(self, post_id) -> int:
        return 1 if self.rows.pop(int(post_id), None) else 0


class InMemoryUserStore:
    """Users kept in a dictionary.

    Needs the post store it is paired with to answer
    ``get_posts_for_user`` and to drop a removed user's posts.
    """

    def __init__(self, posts: InMemoryPostStore) -> None:
        self.posts = posts
        self.rows: Dict[int, UserRead] = {}
        self._ids = itertools.count(1)

    async def list_all(self) -> List[UserRead]:
        return [self.rows[key] for key in sorted(self.rows)]

    async def get_by_id(self, user_id) -> Optional[UserRead]:
        return self.rows.get(int(user_id))

    async def insert(self, record: UserCreate) -> UserRead:
        if any(user.name == record.name for user in self.rows.values()):
            raise ValueError(f"user name already taken: {record.name}")
        user = UserRead(id=next(self._ids), name=record.name)
        self.rows[user.id] = user
        logger.info("Created user %s", user.id)
        return user

    async def update(self, user_id, patch: UserUpdate) -> int:
        current = self.rows.get(int(user_id))
        changes = patch.model_dump(exclude_unset=True)
        if current is None or not changes:
            return 0
        self.rows[current.id] = current.model_copy(update=changes)
        logger.info("Updated user %s", current.id)
        return 1

    async def remove(self, user_id) -> int:
        user = self.rows.pop(int(user_id), None)
        if user is None:
            return 0
        for post_id in [p.id for p in self.posts.rows.values() if p.user_id == user.id]:
            del self.posts.rows[post_id]
        logger.info("Deleted user %s", user.id)
        return 1

    async def get_posts_for_user(self, user_id) -> List[UserPostRead]:
        user = self.rows.get(int(user_id))
        if user is None:
            return []
        return [
            UserPostRead(**post.model_dump(), posted_by=user.name)
            for post in await self.posts.list_all()
            if post.user_id == user.id
        ]
