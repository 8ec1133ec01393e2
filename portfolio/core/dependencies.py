"""Dependency injection utilities for FastAPI routes.

Services are built once by the app factory and kept on ``app.state``; the
providers below hand them to route functions so tests can replace them with
``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Request

from portfolio.core.settings import Settings
from portfolio.services.contact_validator import ContactValidator
from portfolio.services.content_service import ContentCatalog
from portfolio.services.health_service import HealthMonitor
from portfolio.services.submission_processor import SubmissionProcessor


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings."""
    return Settings()


def get_contact_validator(request: Request) -> ContactValidator:
    validator: ContactValidator = request.app.state.contact_validator
    return validator


def get_submission_processor(request: Request) -> SubmissionProcessor:
    processor: SubmissionProcessor = request.app.state.submission_processor
    return processor


def get_content_catalog(request: Request) -> ContentCatalog:
    catalog: ContentCatalog = request.app.state.content_catalog
    return catalog


def get_health_monitor(request: Request) -> HealthMonitor:
    monitor: HealthMonitor = request.app.state.health_monitor
    return monitor
