"""Health check response contracts."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

type LivenessStatus = Literal["ok", "degraded", "unhealthy"]
type ServiceStatus = Literal["healthy", "unhealthy"]
type AggregateStatus = Literal["healthy", "degraded"]


class HealthResponse(BaseModel):
    """Response schema for the liveness endpoint."""

    status: LivenessStatus


class ServiceHealth(BaseModel):
    """Result of probing a single service.

    Attributes:
        status: "healthy" when the probe completed without raising.
        service: Name of the probed service.
        timestamp: Seconds since the epoch at probe time.
        error: Probe failure text, only present when unhealthy.
    """

    model_config = ConfigDict(extra="forbid")

    status: ServiceStatus
    service: str
    timestamp: float
    error: str | None = None


class ApplicationHealth(BaseModel):
    """Aggregate of all service probes."""

    model_config = ConfigDict(extra="forbid")

    status: AggregateStatus
    services: list[ServiceHealth] = Field(default_factory=list)
    timestamp: float
