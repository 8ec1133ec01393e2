"""Error response contracts for API failures."""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict


class ErrorEnvelope(BaseModel):
    """JSON body for failed API requests (unknown routes, missing content).

    Examples:
        ErrorEnvelope(reason="Endpoint not found", code="NOT_FOUND")
    """

    model_config = ConfigDict(extra="forbid")

    error: bool = True
    reason: str
    code: str


NOT_FOUND_RESPONSE: Final[dict[str, Any]] = {
    "model": ErrorEnvelope,
    "description": "Content not found",
}

__all__ = [
    "NOT_FOUND_RESPONSE",
    "ErrorEnvelope",
]
