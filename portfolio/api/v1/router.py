"""API Router aggregator for Version 1 endpoints."""

from fastapi import APIRouter

from portfolio.core.routing import FormRoute
from portfolio.routes import contact_router, content_router, health_router, profile_router

API_V1_PREFIX = "/api/v1"

api_router = APIRouter()

api_router.include_router(health_router.router, tags=["health"])
api_router.include_router(profile_router.router, tags=["profile"])
api_router.include_router(content_router.router, tags=["content"])
api_router.include_router(contact_router.router, tags=["contact"])
api_router.include_router(contact_router.health_router, tags=["contact"])

FORM_ROUTERS = (contact_router.router,)


def form_operations() -> list[tuple[str, str]]:
    """List (path, method) pairs served by FormRoute, as mounted under the v1 prefix.

    Read from the source routers rather than ``app.routes``, whose shape depends
    on how the installed FastAPI release records included routers.
    """
    return [
        (f"{API_V1_PREFIX}{router.prefix}{route.path}", method.lower())
        for router in FORM_ROUTERS
        for route in router.routes
        if isinstance(route, FormRoute)
        for method in sorted(route.methods)
    ]
