"""HTTP middleware for the catalog service.

Request correlation wraps every response; the catch-all below it turns
exceptions that escaped the routers into the 500 error envelope.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_service.api.errors import internal_error_response

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log its outcome.

    A caller-supplied X-Request-ID is reused; otherwise a UUID4 is minted.
    The ID lands on request state (read by the error envelope), in the
    structlog context and on the response headers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
        finally:
            logger.info(
                "Catalog request served",
                method=request.method,
                path=request.url.path,
                query=str(request.query_params) or None,
                status_code=getattr(response, "status_code", 500),
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class CatchAllErrorMiddleware(BaseHTTPMiddleware):
    """Answer unhandled route exceptions with the INTERNAL_ERROR envelope.

    Catalog, validation and HTTP errors are handled by the app's exception
    handlers before reaching here. The exception text is logged, never
    returned.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled catalog error",
                method=request.method,
                path=request.url.path,
                error_type=type(exc).__name__,
            )
            return internal_error_response(request)


def setup_middleware(app: FastAPI) -> None:
    """Install catalog middleware; the last one added runs first.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(CatchAllErrorMiddleware)
    app.add_middleware(RequestIdMiddleware)
