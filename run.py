"""Serve the Blog API with Uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (see ``blog_api.app.core.config``).  Other settings such as
``DATABASE_URL`` or ``STORE_BACKEND`` can be placed in the environment
as well.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from blog_api.app.core.config import settings
from blog_api.app.main import app


async def main() -> None:
    """Start the API server and wait until it shuts down."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
