"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations (``init_db``).  Every
function accepts an explicit database path so that the persistence
accessors can be pointed at different files (tests use a temporary
one); when omitted the path is derived from ``settings.database_url``.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import settings


MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE
        );

        CREATE TABLE IF NOT EXISTS posts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            text TEXT NOT NULL,
            user_id INTEGER NOT NULL,
            FOREIGN KEY(user_id) REFERENCES users(id)
                ON UPDATE CASCADE ON DELETE CASCADE
        );
        """,
    ),
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_posts_user_id ON posts(user_id);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative paths are resolved against
    the ``blog_api`` package directory.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # blog_api/
    return str((base_dir / db_url).resolve())


def get_connection(database_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection; SQLite leaves it off by default.
    """
    conn = sqlite3.connect(database_path or get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(database_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_path: Optional[str] = None) -> int:
    """Create the database if needed and apply pending migrations.

    Returns the schema version after all migrations were applied.
    """
    with get_cursor(database_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
    return current_version
