"""HTTP Middleware — request ids, access logging and trailing-slash tolerance.

Invariants:
    - Every response carries X-Request-ID (the caller's, or a fresh one), 500s included
    - Each request logs exactly one access line
    - "/api/categories/" routes like "/api/categories" (no redirect)

Design Decisions:
    - Unexpected exceptions are rendered here, not left to ServerErrorMiddleware,
      which sits outside user middleware and would drop the request-id and CORS headers
    - Registered before CORSMiddleware so CORS wraps these responses too
"""

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response

from store_api.api.error_handlers import render_unexpected_error

REQUEST_ID_HEADER = "X-Request-ID"

access_logger = logging.getLogger("store_api.access")


def register_middleware(app: FastAPI) -> None:
    """Innermost first: slash stripping must happen before routing."""
    _register_trailing_slash_tolerance(app)
    _register_request_logging(app)


def _register_trailing_slash_tolerance(app: FastAPI) -> None:

    @app.middleware("http")
    async def strip_trailing_slash(request: Request, call_next) -> Response:
        path = request.scope["path"]
        if len(path) > 1 and path.endswith("/"):
            request.scope["path"] = path.rstrip("/") or "/"
        return await call_next(request)


def _register_request_logging(app: FastAPI) -> None:

    @app.middleware("http")
    async def access_log(request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = render_unexpected_error(request, exc)
        response.headers[REQUEST_ID_HEADER] = request_id
        access_logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
