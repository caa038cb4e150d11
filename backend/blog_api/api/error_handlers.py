"""Error Handlers — translate raised errors into the uniform error envelope.

Invariants:
    - PostValidationError -> 400 VALIDATION_ERROR, message = field -> first violation
    - RequestValidationError -> 400 VALIDATION_ERROR, same field -> message shape
    - PostNotFoundError -> 404 POST_NOT_FOUND, message names the id
    - Any other BlogError -> its own status and code
    - Exception (catch-all) -> 500 INTERNAL_ERROR, never leaks internal details
    - Every envelope path is the request path with any "uri=" prefix stripped

Design Decisions:
    - Layered handlers: specific domain errors, BlogError, Pydantic, catch-all
    - Pydantic errors reported under the last named element of `loc` so that
      malformed bodies and domain violations share one client-facing format
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog_api.core.domain_types import ErrorCode
from blog_api.core.errors import (
    BlogError, PostNotFoundError, PostValidationError, build_error_envelope,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_post_validation_handler(app)
    _register_post_not_found_handler(app)
    _register_blog_error_handler(app)
    _register_request_validation_handler(app)
    _register_generic_error_handler(app)


def _envelope_response(exc: BlogError, request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_response(request.url.path),
    )


def _register_post_validation_handler(app: FastAPI) -> None:

    @app.exception_handler(PostValidationError)
    async def post_validation_handler(request: Request, exc: PostValidationError):
        logger.warning(
            f"Validation failed on {request.url.path}: {exc.violations}",
            extra={"error_code": exc.code.value, "path": request.url.path},
        )
        return _envelope_response(exc, request)


def _register_post_not_found_handler(app: FastAPI) -> None:

    @app.exception_handler(PostNotFoundError)
    async def post_not_found_handler(request: Request, exc: PostNotFoundError):
        logger.warning(
            exc.message,
            extra={
                "error_code": exc.code.value,
                "path": request.url.path,
                "post_id": exc.post_id,
            },
        )
        return _envelope_response(exc, request)


def _register_blog_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BlogError)
    async def blog_error_handler(request: Request, exc: BlogError):
        """Handle domain/infrastructure errors without a dedicated handler."""
        logger.error(
            f"BlogError: {exc.message}",
            extra={"error_code": exc.code.value, "path": request.url.path},
        )
        return _envelope_response(exc, request)


def _register_request_validation_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed requests (bad JSON, wrong types, bad path params)."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": ErrorCode.VALIDATION_ERROR.value},
        )
        return JSONResponse(
            status_code=ErrorCode.VALIDATION_ERROR.http_status,
            content=build_error_envelope(
                ErrorCode.VALIDATION_ERROR.http_status,
                ErrorCode.VALIDATION_ERROR.value,
                field_messages(exc.errors()),
                request.url.path,
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_envelope(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                ErrorCode.INTERNAL_ERROR.value,
                "An unexpected error occurred",
                request.url.path,
            ),
        )


def field_messages(errors) -> dict[str, str]:
    """Map Pydantic errors to field -> first message."""
    messages: dict[str, str] = {}
    for e in errors:
        names = [str(part) for part in e["loc"] if isinstance(part, str)]
        field = names[-1] if names else "request"
        messages.setdefault(field, e["msg"])
    return messages
