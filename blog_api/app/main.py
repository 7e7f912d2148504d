"""
Main entrypoint for the Blog API.

This module assembles the FastAPI application: it sets up logging,
installs the request logger and the error handlers, mounts the routers
and attaches the persistence accessors.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn blog_api.app.main:app --reload

Accessors are passed in explicitly; when none are given they are built
from ``settings.store_backend``.
"""

import logging
from typing import Optional, Tuple

from fastapi import FastAPI

from .api.endpoints import info
from .api.router import router as api_router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import log_request
from .services import InMemoryPostStore, InMemoryUserStore, PostStore, UserStore


logger = logging.getLogger(__name__)


def build_stores(backend: Optional[str] = None) -> Tuple[object, object]:
    """Create a ``(user_store, post_store)`` pair for ``backend``."""
    backend = backend or settings.store_backend
    if backend == "memory":
        posts = InMemoryPostStore()
        return InMemoryUserStore(posts), posts
    if backend == "sqlite":
        database_path = get_database_path()
        return UserStore(database_path), PostStore(database_path)
    raise ValueError(f"Unknown store backend: {backend!r}")


def create_app(user_store=None, post_store=None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    user_store, post_store
        Persistence accessors used by the routes.  Pass both to
        substitute another implementation (tests pass in‑memory
        stores).  If either is omitted the pair is built from
        settings, and for SQLite the schema is migrated at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging("DEBUG" if settings.debug else settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    migrate_on_startup = user_store is None or post_store is None
    if migrate_on_startup:
        user_store, post_store = build_stores()
    app.state.user_store = user_store
    app.state.post_store = post_store

    app.middleware("http")(log_request)
    register_exception_handlers(app)

    app.include_router(info.router)
    app.include_router(api_router, prefix="/api")

    if migrate_on_startup and isinstance(user_store, UserStore):
        @app.on_event("startup")
        async def startup_event() -> None:
            # Creates the database file if it does not exist.
            version = init_db(user_store.database_path)
            logger.info("Database %s at schema version %s", user_store.database_path, version)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
