"""
SQLite persistence accessor for users.

Each method opens its own connection, runs a parameterized query and
closes the connection again; nothing is cached between calls.  Ids
arrive straight from the URL, so they are converted with ``int()``
first and a malformed id raises ``ValueError``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from blog_api.app.core.db import get_connection, get_database_path
from blog_api.app.schemas.post import UserPostRead
from blog_api.app.schemas.user import UserCreate, UserRead, UserUpdate


logger = logging.getLogger(__name__)


class UserStore:
    """Data access for the ``users`` table."""

    def __init__(self, database_path: Optional[str] = None) -> None:
        self.database_path = database_path or get_database_path()

    async def list_all(self) -> List[UserRead]:
        conn = get_connection(self.database_path)
        try:
            rows = conn.execute("SELECT id, name FROM users ORDER BY id").fetchall()
            return [self._row_to_user(row) for row in rows]
        finally:
            conn.close()

    async def get_by_id(self, user_id) -> Optional[UserRead]:
        """Return the user with ``user_id`` or ``None`` if there is none."""
        conn = get_connection(self.database_path)
        try:
            row = conn.execute(
                "SELECT id, name FROM users WHERE id = ?", (int(user_id),)
            ).fetchone()
            if not row:
                return None
            return self._row_to_user(row)
        finally:
            conn.close()

    async def insert(self, record: UserCreate) -> UserRead:
        """Insert a new user and return the stored row."""
        conn = get_connection(self.database_path)
        try:
            cursor = conn.execute("INSERT INTO users (name) VALUES (?)", (record.name,))
            user_id = cursor.lastrowid
            conn.commit()
            logger.info("Created user %s", user_id)
            row = conn.execute("SELECT id, name FROM users WHERE id = ?", (user_id,)).fetchone()
            return self._row_to_user(row)
        finally:
            conn.close()

    async def update(self, user_id, patch: UserUpdate) -> int:
        """Apply the fields set on ``patch`` and return the number of rows changed.

        The updated user is not returned; callers re‑fetch it with
        ``get_by_id`` when they need it.
        """
        changes = patch.model_dump(exclude_unset=True)
        if not changes:
            return 0
        assignments = ", ".join(f"{column} = ?" for column in changes)
        conn = get_connection(self.database_path)
        try:
            cursor = conn.execute(
                f"UPDATE users SET {assignments} WHERE id = ?",
                (*changes.values(), int(user_id)),
            )
            conn.commit()
            if cursor.rowcount:
                logger.info("Updated user %s", user_id)
            return cursor.rowcount
        finally:
            conn.close()

    async def remove(self, user_id) -> int:
        """Delete a user (and, through the foreign key, their posts)."""
        conn = get_connection(self.database_path)
        try:
            cursor = conn.execute("DELETE FROM users WHERE id = ?", (int(user_id),))
            conn.commit()
            if cursor.rowcount:
                logger.info("Deleted user %s", user_id)
            return cursor.rowcount
        finally:
            conn.close()

    async def get_posts_for_user(self, user_id) -> List[UserPostRead]:
        conn = get_connection(self.database_path)
        try:
            rows = conn.execute(
                """
                SELECT p.id, p.user_id, p.text, u.name AS posted_by
                FROM posts AS p
                JOIN users AS u ON u.id = p.user_id
                WHERE p.user_id = ?
                ORDER BY p.id
                """,
                (int(user_id),),
            ).fetchall()
            return [UserPostRead(**dict(row)) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> UserRead:
        return UserRead(id=row["id"], name=row["name"])
