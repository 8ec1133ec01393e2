"""Health check routes for uptime monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio.contracts.health_contract import ApplicationHealth, HealthResponse
from portfolio.core.dependencies import get_health_monitor
from portfolio.services.health_service import HealthMonitor

router = APIRouter()


async def health_check() -> HealthResponse:
    """Return service liveness status."""
    return HealthResponse(status="ok")


@router.get("/health", response_model=ApplicationHealth, response_model_exclude_none=True)
async def application_health(
    monitor: Annotated[HealthMonitor, Depends(get_health_monitor)],
) -> ApplicationHealth:
    """Probe every service and report "degraded" if any of them fails."""
    return await monitor.check_all()
