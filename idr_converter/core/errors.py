from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from idr_converter.services.conversion import InvalidAmountError

logger = logging.getLogger("idr_converter.errors")


class UnknownCurrencyError(LookupError):
    """Raised when a currency code is not in the fixed table."""

    def __init__(self, code: str):
        super().__init__(f"Unsupported currency '{code}'")
        self.code = code


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "not_found",
                "detail": exc.detail
                if exc.detail != "Not Found"
                else f"No route for {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def unknown_currency_handler(request: Request, exc: UnknownCurrencyError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "not_found", "detail": str(exc), "currency": exc.code},
    )


def invalid_amount_handler(request: Request, exc: InvalidAmountError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "invalid_amount",
            "reason": exc.kind,
            "detail": exc.reason,
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    # Runs after the request middleware has exited, so the request id comes
    # from request.state rather than the logging context.
    rid = getattr(request.state, "request_id", None) or "-"
    logger.error(
        "unhandled exception on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
        extra={"request_id": rid},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
        headers={"X-Request-ID": rid},
    )
