"""Launch the Portfolio Site API server with uvicorn."""

from __future__ import annotations

import argparse
import ipaddress
import sys
from typing import TYPE_CHECKING

import uvicorn
from pydantic import ValidationError

from portfolio.core.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence

APP_IMPORT_PATH = "portfolio.main:app"


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser for the start-server script."""
    parser = argparse.ArgumentParser(description="Launch the Portfolio Site API via Uvicorn.")
    parser.add_argument(
        "--host",
        help=(
            "Server bind address (default: env HOST or 127.0.0.1; "
            "pass 0.0.0.0 to listen on all interfaces)."
        ),
    )
    parser.add_argument("--port", type=int, help="Server port (default: env PORT or 8000).")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable autoreload; useful for development.",
    )
    return parser


def _unbracket_host(host: str) -> str:
    """Strip IPv6 brackets so uvicorn receives a bare address."""
    candidate = host.strip()
    if candidate.startswith("[") and candidate.endswith("]"):
        inner = candidate[1:-1]
        try:
            ipaddress.IPv6Address(inner.split("%", 1)[0])
        except ValueError:
            return candidate
        return inner
    return candidate


def resolve_bind(args: argparse.Namespace, settings: Settings) -> tuple[str, int]:
    """Pick host and port, preferring CLI flags over settings."""
    host = _unbracket_host(args.host or settings.host)
    port = args.port if args.port is not None else settings.port
    return host, port


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that validates settings and runs uvicorn in the foreground."""
    args = build_parser().parse_args(argv)
    try:
        overrides = {"port": args.port} if args.port is not None else {}
        settings = Settings(**overrides)
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    host, port = resolve_bind(args, settings)
    uvicorn.run(
        APP_IMPORT_PATH,
        host=host,
        port=port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
