"""Mapping of directory errors to HTTP responses."""

from fastapi import HTTPException, Request, status
from fastapi.exception_handlers import http_exception_handler as json_http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortlinks.errors import (
    ShortLinkError,
    EmptyInput,
    NotFound,
    RandomnessFailure,
    KeySpaceExhausted,
)


STATUS_FOR_ERROR = {
    EmptyInput: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    RandomnessFailure: status.HTTP_500_INTERNAL_SERVER_ERROR,
    KeySpaceExhausted: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Short messages for the plain-text surface
MESSAGE_FOR_STATUS = {
    status.HTTP_400_BAD_REQUEST: "URL is required",
    status.HTTP_404_NOT_FOUND: "Short URL does not exist",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Error generating short URL",
}


def status_for(exc: ShortLinkError) -> int:
    """HTTP status code for a directory error."""
    for error_type, code in STATUS_FOR_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(exc: ShortLinkError, plain: bool = False) -> HTTPException:
    """Convert a directory error into an HTTPException.

    Args:
        exc: The directory error
        plain: Use the short fixed message instead of the error text

    Returns:
        HTTPException carrying the mapped status code
    """
    code = status_for(exc)
    detail = MESSAGE_FOR_STATUS.get(code, str(exc)) if plain else str(exc)
    return HTTPException(status_code=code, detail=detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as JSON under /api and as plain text elsewhere."""
    if request.url.path.startswith("/api/"):
        return await json_http_exception_handler(request, exc)

    detail = exc.detail
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        detail = MESSAGE_FOR_STATUS[exc.status_code]

    return PlainTextResponse(
        str(detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )
