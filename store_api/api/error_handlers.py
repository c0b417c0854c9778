"""Error Handlers — global exception handlers that normalize every failure to {"message"}.

Invariants:
    - StoreError -> status from its ErrorKind, body {"message": exc.message}
    - Unmatched route (404) or unsupported method (405) -> 404 "Page not found."
    - RequestValidationError -> 422 naming the offending body fields
    - Exception (catch-all) -> 500 with the raw exception message; the access-log
      middleware renders through the same function so 500s keep its headers
    - Error log lines carry the request id set by the access-log middleware

Design Decisions:
    - Every branch funnels through render_error(): one response shape, one log call
    - Catch-all exposes str(exc) (ADR: existing clients read the raw message;
      kept for wire compatibility)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from store_api.core.errors import (
    InternalError, InvalidBodyError, NotFoundError, StoreError,
)
from store_api.core.messages import PAGE_NOT_FOUND

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_store_error_handler(app)
    _register_not_found_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def render_error(request: Request, exc: StoreError) -> JSONResponse:
    """Log and render a StoreError."""
    status_code = exc.http_status
    extra = {
        "request_id": getattr(request.state, "request_id", None),
        "error_code": exc.code,
        "path": request.url.path,
        "method": request.method,
        "status_code": status_code,
    }
    if status_code >= 500:
        logger.error(f"{exc.code}: {exc.message}", extra=extra)
    else:
        logger.warning(f"{exc.code}: {exc.message}", extra=extra)
    return JSONResponse(status_code=status_code, content=exc.to_response())


def _register_store_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return render_error(request, exc)


def _register_not_found_handler(app: FastAPI) -> None:
    """Routing failures and explicit HTTPExceptions."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in (404, 405):
            return render_error(request, NotFoundError(PAGE_NOT_FOUND))
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return render_error(request, build_body_error(exc.errors()))


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — wraps anything unanticipated as an internal error."""
        return render_unexpected_error(request, exc)


def render_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback, then render exc as a 500 carrying its raw message."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"request_id": getattr(request.state, "request_id", None)},
    )
    return render_error(request, InternalError.wrap(exc))


def build_body_error(errors) -> InvalidBodyError:
    """Name the body fields Pydantic rejected, in order, without duplicates."""
    fields: list[str] = []
    for error in errors:
        if error.get("type") == "json_invalid":
            return InvalidBodyError(malformed=True)
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        if loc:
            name = ".".join(loc)
            if name not in fields:
                fields.append(name)
    return InvalidBodyError(fields)
