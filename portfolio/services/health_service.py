"""Per-service health probes and their aggregate."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from portfolio.contracts.contact_contract import ContactSubmission
from portfolio.contracts.health_contract import ApplicationHealth, ServiceHealth

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from portfolio.services.contact_validator import ContactValidator
    from portfolio.services.content_service import ContentCatalog

logger = logging.getLogger(__name__)

CONTACT_SERVICE = "ContactService"
CONTENT_SERVICE = "ContentService"
PROFILE_SERVICE = "ProfileService"

_PROBE_SUBMISSION = ContactSubmission(
    sender_name="Test",
    sender_email="test@example.com",
    message_content="Health check test message",
)


async def run_probe(service: str, check: Callable[[], Awaitable[object]]) -> ServiceHealth:
    """Run a single probe, reporting any exception as an unhealthy status."""
    try:
        await check()
    except Exception as exc:
        logger.warning("%s health check failed: %s", service, exc)
        return ServiceHealth(
            status="unhealthy", service=service, timestamp=time.time(), error=str(exc)
        )
    return ServiceHealth(status="healthy", service=service, timestamp=time.time())


class HealthMonitor:
    """Probes the contact, content, and profile services."""

    def __init__(self, validator: ContactValidator, catalog: ContentCatalog) -> None:
        self._validator = validator
        self._catalog = catalog

    async def check_contact(self) -> ServiceHealth:
        async def _validate_sample() -> object:
            return self._validator.validate(_PROBE_SUBMISSION)

        return await run_probe(CONTACT_SERVICE, _validate_sample)

    async def check_content(self) -> ServiceHealth:
        return await run_probe(CONTENT_SERVICE, self._catalog.get_skills)

    async def check_profile(self) -> ServiceHealth:
        return await run_probe(PROFILE_SERVICE, self._catalog.get_profile)

    async def check_all(self) -> ApplicationHealth:
        """Probe every service concurrently; any unhealthy probe degrades the total."""
        results = await asyncio.gather(
            self.check_profile(), self.check_contact(), self.check_content()
        )
        status = "healthy" if all(result.status == "healthy" for result in results) else "degraded"
        return ApplicationHealth(status=status, services=list(results), timestamp=time.time())
