#!/usr/bin/env python3
"""
Create the Blog API SQLite database and load sample users and posts.

The schema is migrated first, so the script can be pointed at a file
that does not exist yet.  Existing rows are kept unless ``--reset`` is
given; users already present (by name) are not inserted twice.

Usage:
    python seed_db.py --db ./blog_api/blog.db
    python seed_db.py --db ./blog_api/blog.db --reset
"""

import argparse
import asyncio
import logging
import os
import sys

from blog_api.app.core.db import get_cursor, get_database_path, init_db
from blog_api.app.core.logging_config import setup_logging
from blog_api.app.schemas.post import PostCreate
from blog_api.app.schemas.user import UserCreate
from blog_api.app.services import PostStore, UserStore


logger = logging.getLogger("seed_db")

SAMPLE_POSTS = {
    "Frodo Baggins": [
        "I wish the Ring had never come to me. I wish none of this had happened.",
        "I will take the Ring, though I do not know the way.",
    ],
    "Samwise Gamgee": [
        "I can't carry it for you, but I can carry you.",
        "Po-tay-toes. Boil 'em, mash 'em, stick 'em in a stew.",
    ],
    "Gandalf": [
        "All we have to decide is what to do with the time that is given to us.",
        "A wizard is never late, nor is he early.",
    ],
    "Aragorn": ["I would have followed you, my brother, my captain, my king."],
    "Legolas": ["They're taking the Hobbits to Isengard!"],
}


def reset(database_path: str) -> None:
    with get_cursor(database_path) as cursor:
        cursor.execute("DELETE FROM posts")
        cursor.execute("DELETE FROM users")
        cursor.execute("DELETE FROM sqlite_sequence WHERE name IN ('users', 'posts')")


async def seed(database_path: str) -> int:
    """Insert the sample data; returns the number of users created."""
    users = UserStore(database_path)
    posts = PostStore(database_path)
    existing = {user.name for user in await users.list_all()}
    created = 0
    for name, texts in SAMPLE_POSTS.items():
        if name in existing:
            continue
        user = await users.insert(UserCreate(name=name))
        for text in texts:
            await posts.insert(PostCreate(user_id=user.id, text=text))
        created += 1
    return created


def main(argv=None):
    ap = argparse.ArgumentParser(description="Seed the Blog API SQLite database.")
    ap.add_argument("--db", help="Path to SQLite DB file (defaults to DATABASE_URL)")
    ap.add_argument("--reset", action="store_true", help="Delete all users and posts before seeding")
    args = ap.parse_args(argv)

    setup_logging("INFO")
    database_path = os.path.abspath(args.db) if args.db else get_database_path()
    version = init_db(database_path)
    logger.info("Database %s at schema version %s", database_path, version)
    if args.reset:
        reset(database_path)
        logger.info("Removed existing users and posts")
    created = asyncio.run(seed(database_path))
    logger.info("Seeded %s users", created)
    return 0


if __name__ == "__main__":
    sys.exit(main())
