"""ASGI entry point for the Portfolio Site API. Uses factory pattern for app creation."""

from portfolio.core.dependencies import get_settings
from portfolio.core.factory import create_app

settings = get_settings()
app = create_app(settings)
