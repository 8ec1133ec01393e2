"""Route classes shared by form-handling routers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from fastapi.routing import APIRoute

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine

    from fastapi import Request
    from starlette.responses import Response

logger = logging.getLogger(__name__)


class MissingMalformedFallbackError(TypeError):
    """Raised when a form route's response model cannot describe malformed input."""

    def __init__(self, path: str) -> None:
        """Name the route whose response model lacks for_malformed_input()."""
        super().__init__(f"Response model for {path} must define for_malformed_input()")


class FormRoute(APIRoute):
    """Route that answers undecodable form bodies with a normal HTTP 200 payload.

    Browser forms expect the same response shape whether or not their input
    could be parsed, so request validation errors are turned into the response
    model's ``for_malformed_input()`` value instead of a 4xx error.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()
        fallback_factory = getattr(self.response_model, "for_malformed_input", None)
        if fallback_factory is None:
            raise MissingMalformedFallbackError(self.path)

        async def form_route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except RequestValidationError as exc:
                logger.warning(
                    "Malformed form data on %s %s: %s",
                    request.method,
                    request.url.path,
                    str(exc.errors())[:1000],
                )
                fallback = fallback_factory()
                return ORJSONResponse(content=fallback.model_dump(mode="json", by_alias=True))

        return form_route_handler
