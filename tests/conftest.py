# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets environment defaults before the application is imported and
# provides apps wired to in-memory or temporary SQLite stores.
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# blog_api.app.core.config reads the environment once, at import time.

os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("EXPOSE_ERROR_STACK", "true")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_LEVEL", "INFO")

import asyncio

import pytest
from fastapi.testclient import TestClient

from blog_api.app.core.db import init_db
from blog_api.app.main import create_app
from blog_api.app.schemas.post import PostCreate
from blog_api.app.schemas.user import UserCreate
from blog_api.app.services import InMemoryPostStore, InMemoryUserStore, PostStore, UserStore


def make_client(user_store, post_store) -> TestClient:
    # Errors rendered by the error responder are re-raised by Starlette
    # after the response is sent; keep the response instead.
    return TestClient(create_app(user_store, post_store), raise_server_exceptions=False)


# =============================================================================
# In-memory fixtures
# =============================================================================

@pytest.fixture
def post_store():
    return InMemoryPostStore()


@pytest.fixture
def user_store(post_store):
    return InMemoryUserStore(post_store)


@pytest.fixture
def client(user_store, post_store):
    return make_client(user_store, post_store)


@pytest.fixture
def seeded(user_store, post_store):
    """Two users, the first with two posts."""
    async def load():
        frodo = await user_store.insert(UserCreate(name="Frodo"))
        sam = await user_store.insert(UserCreate(name="Sam"))
        await post_store.insert(PostCreate(user_id=frodo.id, text="Where's Sam?"))
        await post_store.insert(PostCreate(user_id=frodo.id, text="I will take it."))
        return frodo, sam

    return asyncio.run(load())


# =============================================================================
# SQLite fixtures
# =============================================================================

@pytest.fixture
def database_path(tmp_path):
    path = str(tmp_path / "blog.db")
    init_db(path)
    return path


@pytest.fixture
def sqlite_stores(database_path):
    return UserStore(database_path), PostStore(database_path)


@pytest.fixture
def sqlite_client(sqlite_stores):
    return make_client(*sqlite_stores)
