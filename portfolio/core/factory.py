"""FastAPI app construction and OpenAPI schema helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.api.v1.router import API_V1_PREFIX, api_router, form_operations
from portfolio.core.exceptions import api_http_exception_handler, content_unavailable_handler
from portfolio.routes.health_router import health_check
from portfolio.services.contact_validator import ContactValidator
from portfolio.services.content_service import ContentCatalog, ContentUnavailableError
from portfolio.services.health_service import HealthMonitor
from portfolio.services.notifier import DelayedNotifier
from portfolio.services.submission_processor import SubmissionProcessor

if TYPE_CHECKING:
    from portfolio.core.settings import Settings
    from portfolio.services.notifier import SubmissionNotifier

logger = logging.getLogger(__name__)
UNPROCESSABLE_STATUS: Final[str] = "422"
PACKAGE_LOGGER: Final[str] = "portfolio"


def _install_services(
    app: FastAPI,
    settings: Settings,
    notifier: SubmissionNotifier | None,
    catalog: ContentCatalog | None,
) -> None:
    validator = ContactValidator(
        spam_keywords=settings.spam_keywords,
        suspicious_name_patterns=settings.suspicious_name_patterns,
    )
    content_catalog = catalog or ContentCatalog()
    app.state.contact_validator = validator
    app.state.submission_processor = SubmissionProcessor(
        validator=validator,
        notifier=notifier or DelayedNotifier(settings.processing_delay_seconds),
        priority_keywords=settings.priority_keywords,
        timeout_seconds=settings.processing_timeout_seconds,
    )
    app.state.content_catalog = content_catalog
    app.state.health_monitor = HealthMonitor(validator, content_catalog)


def create_app(
    settings: Settings,
    *,
    notifier: SubmissionNotifier | None = None,
    catalog: ContentCatalog | None = None,
) -> FastAPI:
    """Construct and configure the FastAPI application instance.

    Args:
        settings: Validated runtime options.
        notifier: Delivery step for valid submissions; defaults to a
            DelayedNotifier using settings.processing_delay_seconds.
        catalog: Content source; defaults to the built-in sample catalog.

    Returns:
        FastAPI: Application wired with orjson responses.
    """
    logging.getLogger(PACKAGE_LOGGER).setLevel(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        default_response_class=ORJSONResponse,
    )
    app.state.settings = settings
    _install_services(app, settings, notifier, catalog)
    # Mount versioned API router; keeps new endpoints scoped under /api/v1.
    app.include_router(api_router, prefix=API_V1_PREFIX)
    app.add_exception_handler(StarletteHTTPException, api_http_exception_handler)
    app.add_exception_handler(ContentUnavailableError, content_unavailable_handler)
    app.add_api_route("/health", health_check, methods=["GET"], include_in_schema=False)

    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        app.openapi_schema = get_openapi(
            title=app.title,
            version=app.version,
            openapi_version=app.openapi_version,
            summary=app.summary,
            description=app.description,
            routes=app.routes,
        )
        paths = app.openapi_schema.get("paths", {})
        # Form routes answer malformed bodies with HTTP 200, never 422.
        for path, method in form_operations():
            operation = paths.get(path, {}).get(method, {})
            operation.get("responses", {}).pop(UNPROCESSABLE_STATUS, None)
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]

    logger.info("Created %s %s", settings.app_name, settings.app_version)
    return app
