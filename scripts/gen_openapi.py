"""Export the Portfolio Site API OpenAPI document and check its public contract.

The exported document is what the site's front end is built against, so the
export refuses to write a schema that drops a public endpoint or advertises a
422 response on the contact form routes (those always answer HTTP 200).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import orjson

from portfolio.api.v1.router import API_V1_PREFIX, form_operations
from portfolio.core.factory import UNPROCESSABLE_STATUS, create_app
from portfolio.core.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_OUTPUT: Final[Path] = Path("openapi/openapi.json")

PUBLIC_PATHS: Final[tuple[str, ...]] = tuple(
    f"{API_V1_PREFIX}{path}"
    for path in (
        "/contact",
        "/contact/validate",
        "/profile",
        "/profile/context",
        "/skills",
        "/experiences",
        "/projects",
        "/about",
        "/content/summary",
        "/health",
    )
)


class SchemaContractError(ValueError):
    """Raised when the generated schema breaks the published API contract."""

    def __init__(self, problems: Sequence[str]) -> None:
        """Keep the individual problems and join them for the message."""
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def build_schema(settings: Settings | None = None) -> dict[str, Any]:
    """Build the schema exactly as the running app serves it at /openapi.json."""
    app = create_app(settings or Settings())
    return app.openapi()


def contract_problems(schema: dict[str, Any]) -> list[str]:
    """List every way the schema deviates from the public API contract."""
    paths = schema.get("paths", {})
    problems = [f"missing path {path}" for path in PUBLIC_PATHS if path not in paths]
    for path, method in form_operations():
        responses = paths.get(path, {}).get(method, {}).get("responses", {})
        if UNPROCESSABLE_STATUS in responses:
            problems.append(f"{method.upper()} {path} documents a 422 response")
    return problems


def render_schema(schema: dict[str, Any]) -> bytes:
    # Sorted keys keep the export stable across runs for --check.
    return orjson.dumps(schema, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)


def export_schema(output_path: Path, *, check_only: bool = False) -> bool:
    """Write the schema, or with check_only report whether the file is current.

    Raises:
        SchemaContractError: If the schema breaks the public contract.
    """
    schema = build_schema()
    problems = contract_problems(schema)
    if problems:
        raise SchemaContractError(problems)

    payload = render_schema(schema)
    if check_only:
        return output_path.is_file() and output_path.read_bytes() == payload

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(payload)
    return True


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export the Portfolio Site API OpenAPI schema."
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Schema file to write (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the schema file is missing or out of date.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Export or check the schema, returning a process exit code."""
    args = parse_args(argv)
    try:
        current = export_schema(args.output, check_only=args.check)
    except SchemaContractError as exc:
        for problem in exc.problems:
            print(f"OpenAPI contract violation: {problem}", file=sys.stderr)
        return 1

    if args.check:
        if not current:
            print(f"{args.output} is out of date; rerun gen_openapi", file=sys.stderr)
            return 1
        print(f"{args.output} is up to date")
        return 0

    print(f"Wrote OpenAPI schema to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
