"""Content endpoints for skills, experiences, projects, and the about text."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio.contracts.content_contract import (
    AboutText,
    ContentSummary,
    Experience,
    Project,
    Skill,
)
from portfolio.contracts.errors import NOT_FOUND_RESPONSE
from portfolio.contracts.health_contract import ServiceHealth
from portfolio.core.dependencies import get_content_catalog, get_health_monitor
from portfolio.services.content_service import ContentCatalog
from portfolio.services.health_service import HealthMonitor

logger = logging.getLogger(__name__)

router = APIRouter(responses={404: NOT_FOUND_RESPONSE})

Catalog = Annotated[ContentCatalog, Depends(get_content_catalog)]


@router.get("/skills", response_model=list[Skill], summary="List skills")
async def list_skills(catalog: Catalog) -> list[Skill]:
    skills = await catalog.get_skills()
    logger.info("Skills retrieved: %d", len(skills))
    return skills


@router.get("/experiences", response_model=list[Experience], summary="List work experience")
async def list_experiences(catalog: Catalog) -> list[Experience]:
    experiences = await catalog.get_experiences()
    logger.info("Experiences retrieved: %d", len(experiences))
    return experiences


@router.get("/projects", response_model=list[Project], summary="List portfolio projects")
async def list_projects(catalog: Catalog) -> list[Project]:
    projects = await catalog.get_projects()
    logger.info("Projects retrieved: %d", len(projects))
    return projects


@router.get("/about", response_model=AboutText, summary="Get the about section")
async def get_about(catalog: Catalog) -> AboutText:
    return AboutText(content=await catalog.get_about_text())


@router.get(
    "/content/summary",
    response_model=ContentSummary,
    summary="Summarize the content catalog",
    description="Counts of each content section plus the about text length.",
)
async def content_summary(catalog: Catalog) -> ContentSummary:
    """Return section counts for overview widgets."""
    summary = await catalog.get_summary()
    logger.info(
        "Content summary generated: skills=%d experiences=%d projects=%d",
        summary.skills_count,
        summary.experiences_count,
        summary.projects_count,
    )
    return summary


@router.get(
    "/content/health", response_model=ServiceHealth, response_model_exclude_none=True
)
async def content_health(
    monitor: Annotated[HealthMonitor, Depends(get_health_monitor)],
) -> ServiceHealth:
    """Probe the content catalog by loading the skills."""
    return await monitor.check_content()
