"""
SQLite persistence accessor for posts.

Posts are only created through the API, nested under their user;
``update`` and ``remove`` are part of the accessor but not exposed
over HTTP.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from blog_api.app.core.db import get_connection, get_database_path
from blog_api.app.schemas.post import PostCreate, PostRead, PostUpdate


logger = logging.getLogger(__name__)


class PostStore:
    """Data access for the ``posts`` table."""

    def __init__(self, database_path: Optional[str] = None) -> None:
        self.database_path = database_path or get_database_path()

    async def list_all(self) -> List[PostRead]:
        conn = get_connection(self.database_path)
        try:
            rows = conn.execute("SELECT id, user_id, text FROM posts ORDER BY id").fetchall()
            return [self._row_to_post(row) for row in rows]
        finally:
            conn.close()

    async def get_by_id(self, post_id) -> Optional[PostRead]:
        conn = get_connection(self.database_path)
        try:
            row = conn.execute(
                "SELECT id, user_id, text FROM posts WHERE id = ?", (int(post_id),)
            ).fetchone()
            return self._row_to_post(row) if row else None
        finally:
            conn.close()

    async def insert(self, record: PostCreate) -> PostRead:
        """Insert a post and return it.

        The foreign key on ``user_id`` is enforced, so inserting a post
        for a user that does not exist raises ``sqlite3.IntegrityError``.
        """
        conn = get_connection(self.database_path)
        try:
            cursor = conn.execute(
                "INSERT INTO posts (user_id, text) VALUES (?, ?)",
                (record.user_id, record.text),
            )
            post_id = cursor.lastrowid
            conn.commit()
            logger.info("Created post %s for user %s", post_id, record.user_id)
            row = conn.execute(
                "SELECT id, user_id, text FROM posts WHERE id = ?", (post_id,)
            ).fetchone()
            return self._row_to_post(row)
        finally:
            conn.close()

    async def update(self, post_id, patch: PostUpdate) -> int:
        changes = patch.model_dump(exclude_unset=True)
        if not changes:
            return 0
        assignments = ", ".join(f"{column} = ?" for column in changes)
        conn = get_connection(self.database_path)
        try:
            cursor = conn.execute(
                f"UPDATE posts SET {assignments} WHERE id = ?",
                (*changes.values(), int(post_id)),
            )
            conn.commit()
            if cursor.rowcount:
                logger.info("Updated post %s", post_id)
            return cursor.rowcount
        finally:
            conn.close()

    async def remove(self, post_id) -> int:
        conn = get_connection(self.database_path)
        try:
            cursor = conn.execute("DELETE FROM posts WHERE id = ?", (int(post_id),))
            conn.commit()
            if cursor.rowcount:
                logger.info("Deleted post %s", post_id)
            return cursor.rowcount
        finally:
            conn.close()

    @staticmethod
    def _row_to_post(row: sqlite3.Row) -> PostRead:
        return PostRead(id=row["id"], user_id=row["user_id"], text=row["text"])
