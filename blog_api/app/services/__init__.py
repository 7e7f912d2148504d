"""
Persistence accessors.

``UserStore`` and ``PostStore`` wrap the SQLite tables; the classes in
``memory_store`` provide the same coroutine interface backed by plain
dictionaries.  The application receives its accessors at construction
time (see ``create_app``) so either implementation can be plugged in.
"""

from .memory_store import InMemoryPostStore, InMemoryUserStore
from .post_store import PostStore
from .user_store import UserStore

__all__ = ["InMemoryPostStore", "InMemoryUserStore", "PostStore", "UserStore"]
