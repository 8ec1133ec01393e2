"""Profile endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio.contracts.content_contract import HomeContext, ProfileInfo
from portfolio.contracts.errors import NOT_FOUND_RESPONSE
from portfolio.contracts.health_contract import ServiceHealth
from portfolio.core.dependencies import get_content_catalog, get_health_monitor
from portfolio.services.content_service import ContentCatalog
from portfolio.services.health_service import HealthMonitor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", responses={404: NOT_FOUND_RESPONSE})


@router.get("", response_model=ProfileInfo, summary="Get basic profile information")
async def get_profile(
    catalog: Annotated[ContentCatalog, Depends(get_content_catalog)],
) -> ProfileInfo:
    """Return name, headline, and contact details."""
    profile = await catalog.get_profile()
    logger.info("Profile retrieved for %s", profile.name)
    return profile


@router.get(
    "/context",
    response_model=HomeContext,
    summary="Get the complete home page context",
    description="Profile details together with the about text, skills, experience, and projects.",
)
async def get_profile_context(
    catalog: Annotated[ContentCatalog, Depends(get_content_catalog)],
) -> HomeContext:
    context = await catalog.get_home_context()
    logger.info(
        "Profile context retrieved: skills=%d experiences=%d projects=%d",
        len(context.skills),
        len(context.experiences),
        len(context.projects),
    )
    return context


@router.get("/health", response_model=ServiceHealth, response_model_exclude_none=True)
async def profile_health(
    monitor: Annotated[HealthMonitor, Depends(get_health_monitor)],
) -> ServiceHealth:
    return await monitor.check_profile()
