"""Error envelope shared by exception handlers and middleware."""

from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "An internal error occurred"


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    """Build the standard error envelope.

    Args:
        request: Request being answered; supplies the request ID.
        status_code: HTTP status.
        error_code: Machine-readable error code.
        message: Human-readable message.
        details: Optional list of {field, message} entries.

    Returns:
        JSON response with error_code, message, details and request_id.
    """
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


def internal_error_response(request: Request) -> JSONResponse:
    """Build the 500 envelope, which never exposes exception text."""
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR_CODE,
        INTERNAL_ERROR_MESSAGE,
    )
