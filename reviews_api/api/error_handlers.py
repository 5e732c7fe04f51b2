"""Error Handlers — global exception handling for the Reviews API.

Invariants:
    - ReviewApiError -> its own status and public body ({"error"} or {"errors"})
    - Framework 405 (method outside the route's list) -> route and key checks first,
      then {"error": "Method not allowed"}; other framework HTTP errors -> {"error"}
    - Any other exception -> 500 {"error": "Internal server error"}, never detail
    - Every path ends in write_response()

Design Decisions:
    - Three layers: domain (ReviewApiError), framework HTTP errors, catch-all
    - Catch-all as HTTP middleware: Starlette re-raises Exception handlers from its
      outermost middleware, while this layer always answers the client
"""

import logging

from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from reviews_api.api.response_writer import write_response
from reviews_api.api.routes.reviews import reject_unrouted_method
from reviews_api.core.errors import ReviewApiError

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = {"error": "Internal server error"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_review_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _render_review_error(request: Request, exc: ReviewApiError):
    log = logger.error if exc.http_status >= 500 else logger.info
    log(
        f"ReviewApiError: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return write_response(exc.http_status, exc.to_response())


def _register_review_error_handler(app: FastAPI) -> None:
    """Register Reviews API domain/infrastructure error handler."""

    @app.exception_handler(ReviewApiError)
    async def review_error_handler(request: Request, exc: ReviewApiError):
        """Handle all typed Reviews API errors."""
        return _render_review_error(request, exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for HTTP errors raised by the router itself."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unrouted methods go through the review pipeline's checks."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            try:
                await reject_unrouted_method(request)
            except ReviewApiError as review_exc:
                return _render_review_error(request, review_exc)
        return write_response(exc.status_code, {"error": str(exc.detail)})


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.middleware("http")
    async def generic_error_handler(request: Request, call_next):
        """Catch-all — never leaks internal details."""
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
                extra={"path": request.url.path, "method": request.method},
            )
            return write_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR,
            )
