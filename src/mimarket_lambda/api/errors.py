import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from mimarket_lambda.api.responses import FormattedResponse, format_error

logger = logging.getLogger(__name__)


class RequestError(Exception):
    """The inbound request was rejected before reaching the processor."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def to_response(formatted: FormattedResponse) -> Response:
    return Response(
        content=formatted.body,
        status_code=formatted.status_code,
        headers=formatted.headers,
        media_type="application/json" if formatted.body else None,
    )


def request_error_handler(request: Request, exc: RequestError) -> Response:
    logger.error("rejected request to %s: %s", request.url.path, exc.message)
    return to_response(format_error(exc.message, exc.status_code))


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    message: Optional[str] = exc.detail if isinstance(exc.detail, str) else None
    return to_response(format_error(message or "Error", exc.status_code))


def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    logger.exception("processing failed for %s", request.url.path)
    return to_response(format_error(f"Processing failed: {exc}", 500))
