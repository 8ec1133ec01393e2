from __future__ import annotations

import pytest

from portfolio.contracts.content_contract import PortfolioContent, Skill
from portfolio.services.contact_validator import ContactValidator
from portfolio.services.content_service import ContentCatalog
from portfolio.services.health_service import (
    CONTACT_SERVICE,
    CONTENT_SERVICE,
    PROFILE_SERVICE,
    HealthMonitor,
    run_probe,
)
from portfolio.services.sample_content import DEFAULT_CONTENT

pytestmark = pytest.mark.asyncio


async def test_all_services_healthy_with_default_catalog() -> None:
    monitor = HealthMonitor(ContactValidator(), ContentCatalog())

    health = await monitor.check_all()

    assert health.status == "healthy"
    assert [service.service for service in health.services] == [
        PROFILE_SERVICE,
        CONTACT_SERVICE,
        CONTENT_SERVICE,
    ]
    assert all(service.error is None for service in health.services)


async def test_broken_catalog_degrades_aggregate() -> None:
    broken = PortfolioContent.model_validate(
        {
            **DEFAULT_CONTENT.model_dump(),
            "skills": [Skill(name="", description="nameless")],
        }
    )
    monitor = HealthMonitor(ContactValidator(), ContentCatalog(broken))

    health = await monitor.check_all()
    content = await monitor.check_content()

    assert health.status == "degraded"
    assert content.status == "unhealthy"
    assert content.error == "Failed to retrieve skills: Skill name cannot be empty"
    assert (await monitor.check_profile()).status == "healthy"


async def test_run_probe_reports_exceptions() -> None:
    async def _explode() -> object:
        message = "boom"
        raise RuntimeError(message)

    result = await run_probe("Widget", _explode)

    assert result.status == "unhealthy"
    assert result.service == "Widget"
    assert result.error == "boom"
