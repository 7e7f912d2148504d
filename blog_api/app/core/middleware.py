"""
Request logger.

Runs on every request before routing and records a timestamp, the
HTTP method and the original URL (path plus query string).  It never
short‑circuits: the request is always handed on to the next layer.
"""

import logging
from datetime import datetime
from typing import Awaitable, Callable

from fastapi import Request, Response


logger = logging.getLogger("blog_api.request")


def original_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


async def log_request(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    logger.info("[%s] %s to %s", timestamp, request.method, original_url(request))
    return await call_next(request)
