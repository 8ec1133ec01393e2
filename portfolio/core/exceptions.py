"""Exception handlers and error formatting utilities for FastAPI."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING, Final

from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.contracts.errors import ErrorEnvelope
from portfolio.services.content_service import ContentUnavailableError

logger = logging.getLogger(__name__)

API_PATH_PREFIX: Final[str] = "/api/"
ENDPOINT_NOT_FOUND: Final[str] = "Endpoint not found"
DATA_NOT_FOUND_CODE: Final[str] = "DATA_NOT_FOUND"

if TYPE_CHECKING:
    from fastapi import Request
    from starlette.responses import Response


def status_code_name(status_code: int) -> str:
    """Turn an HTTP status into an upper snake case code, e.g. 404 -> NOT_FOUND."""
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        return "HTTP_ERROR"
    return phrase.upper().replace(" ", "_").replace("-", "_")


async def api_http_exception_handler(request: Request, exc: Exception) -> Response:
    """Answer HTTP errors under /api with a JSON envelope; defer to FastAPI elsewhere."""
    if not isinstance(exc, StarletteHTTPException):
        raise TypeError from exc
    if not request.url.path.startswith(API_PATH_PREFIX):
        return await http_exception_handler(request, exc)

    if exc.status_code == HTTPStatus.NOT_FOUND:
        reason = ENDPOINT_NOT_FOUND
    else:
        reason = str(exc.detail)
    logger.info(
        "HTTP %d on %s %s: %s", exc.status_code, request.method, request.url.path, reason
    )
    envelope = ErrorEnvelope(reason=reason, code=status_code_name(exc.status_code))
    return ORJSONResponse(
        status_code=exc.status_code,
        content=envelope.model_dump(mode="json"),
        headers=exc.headers,
    )


async def content_unavailable_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Report catalog sections with missing data as 404 responses."""
    if not isinstance(exc, ContentUnavailableError):
        raise TypeError from exc
    logger.error("Content unavailable on %s %s: %s", request.method, request.url.path, exc)
    envelope = ErrorEnvelope(reason=str(exc), code=DATA_NOT_FOUND_CODE)
    return ORJSONResponse(status_code=404, content=envelope.model_dump(mode="json"))
