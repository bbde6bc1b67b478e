# This file defines API error types and the exception handlers that turn them into responses.
# Every error response is status-only: clients get a code and an empty body, never a payload.
# Not-found is an expected outcome of a well-formed query, so it is logged quietly.
# Unexpected failures, including MongoDB errors, are logged with a traceback and answered with 500.

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Domain error type carrying the HTTP status to answer with."""

    def __init__(self, *, status_code: int, error_code: str, message: str) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        super().__init__(message)


class RecordNotFoundError(APIError):
    """No record matched the query."""

    def __init__(self, *, collection: str, message: str | None = None) -> None:
        self.collection = collection
        super().__init__(
            status_code=404,
            error_code="RECORD_NOT_FOUND",
            message=message or f"No matching records in {collection}.",
        )


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> Response:
        log_level = logging.DEBUG if exc.status_code == 404 else logging.WARNING
        logger.log(
            log_level,
            "%s %s -> %s %s: %s (request_id=%s)",
            request.method,
            request.url.path,
            exc.status_code,
            exc.error_code,
            exc.message,
            _request_id(request),
        )
        return Response(status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
        logger.info(
            "Rejected query parameters for %s: %s (request_id=%s)",
            request.url.path,
            exc.errors(),
            _request_id(request),
        )
        return Response(status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        logger.exception(
            "Unhandled error for %s %s (request_id=%s)",
            request.method,
            request.url.path,
            _request_id(request),
            exc_info=exc,
        )
        return Response(status_code=500)
