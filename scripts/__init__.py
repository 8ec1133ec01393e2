"""CLI helpers for server startup and OpenAPI generation."""

__all__ = [
    "gen_openapi",
    "start_server",
]
