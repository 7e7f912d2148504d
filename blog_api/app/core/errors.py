"""
Error types and the exception handlers that render them.

Two kinds of failure reach the client:

* ``RequestRejected`` is raised by the request validators in
  ``api.dependencies`` when a precondition does not hold (unknown user,
  missing field).  It is rendered as ``{"message": ...}`` with the
  status it carries and never reaches the error responder.
* Everything else is handled by the error responder, which answers
  with the error's declared status (``APIError.status_code``) or 500
  and the body ``{"customMessage", "message", "stack"}``.

Exposing ``stack`` to callers is only acceptable for a sample
deployment; set ``EXPOSE_ERROR_STACK=false`` to blank it out.
"""

import logging
import traceback
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings


logger = logging.getLogger(__name__)

CUSTOM_MESSAGE = "something went wrong"


class RequestRejected(Exception):
    """Raised by a validator to end the request with a 4xx response."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class APIError(Exception):
    """Unexpected failure carrying an explicit HTTP status."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def format_stack(exc: BaseException) -> str:
    if not settings.expose_error_stack:
        return ""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def error_response(exc: BaseException, status_code: int, message: Optional[str] = None) -> JSONResponse:
    """Build the uniform error body for ``exc``."""
    return JSONResponse(
        status_code=status_code,
        content={
            "customMessage": CUSTOM_MESSAGE,
            "message": str(exc) if message is None else message,
            "stack": format_stack(exc),
        },
    )


async def request_rejected_handler(request: Request, exc: RequestRejected) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    logger.error("%s %s failed with %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc, exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparsable request bodies as a client error.

    The validators read the JSON body themselves, so the only
    validation errors FastAPI raises on its own are for malformed JSON.
    """
    message = "; ".join(str(err.get("msg", "")) for err in exc.errors()) or "invalid request"
    return error_response(exc, status.HTTP_400_BAD_REQUEST, message)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # No traceback here: ServerErrorMiddleware re-raises after this
    # response is sent and the server logs the traceback once.
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(exc, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the validator and error responder handlers to ``app``."""
    app.add_exception_handler(RequestRejected, request_rejected_handler)
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    # A handler for ``Exception`` is installed on Starlette's
    # ServerErrorMiddleware: it renders the response and then re-raises
    # so the server still logs the failure.
    app.add_exception_handler(Exception, unexpected_error_handler)
