"""Error Handlers — global exception handlers for the Books API.

Invariants:
    - Every failure leaves as {"error": {"message", "status"}}
    - BooksApiError → its own status and message (400 list, 404 text, 500 text)
    - RequestValidationError (malformed JSON) → 400 with a message list
    - Starlette HTTPException (unknown route, bad method) → its status and detail
    - Exception (catch-all) → 500 with the exception message, never a traceback

Design Decisions:
    - Four-layer handler: domain, request parsing, routing, catch-all
    - Registered from main.py via register_error_handlers (keeps main.py thin)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from books_api.core.errors import BooksApiError, error_envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_books_api_error_handler(app)
    _register_request_validation_handler(app)
    _register_http_exception_handler(app)
    _register_generic_error_handler(app)


def _register_books_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BooksApiError)
    async def books_api_error_handler(request: Request, exc: BooksApiError):
        """Handle domain and storage errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.category.value,
                "path": request.url.path,
                "status": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_request_validation_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Body could not be decoded (e.g. malformed JSON)."""
        logger.warning(
            f"Unparseable request on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope(
                _format_request_errors(exc), status.HTTP_400_BAD_REQUEST,
            ),
        )


def _register_http_exception_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — message only, no traceback in the body."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                str(exc) or "Internal Server Error",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        )


def _format_request_errors(exc: RequestValidationError) -> list[str]:
    """One line per error: "<location>: <message>"."""
    return [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
