from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.errors import AppError, BadRequest, InternalError

logger = logging.getLogger(__name__)


def _bad_request_from(exc: RequestValidationError) -> BadRequest:
    locations = {err.get("loc", ("",))[0] for err in exc.errors()}
    if "body" in locations:
        return BadRequest("Invalid request body")
    if "path" in locations:
        return BadRequest("Invalid ID format")
    return BadRequest("Invalid request")


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> PlainTextResponse:  # noqa: WPS430
        log = logger.error if exc.status_code >= 500 else logger.info
        log(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:  # noqa: WPS430
        error = _bad_request_from(exc)
        logger.info(
            "%s: %s",
            error.message,
            exc.errors(),
            extra={"path": request.url.path, "method": request.method},
        )
        return PlainTextResponse(error.message, status_code=error.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:  # noqa: WPS430
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> PlainTextResponse:  # noqa: WPS430
        error = InternalError("Unexpected server error")
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return PlainTextResponse(error.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
