"""Entry point wiring configuration, the Elasticsearch client, and result output."""

from __future__ import annotations

import sys
from typing import List, Optional

from .client import ESClient
from .config import ExportSettings, parse_args, resolve_settings
from .dispatcher import dispatch_query
from .errors import ExportError
from .materializer import materialize


def _build_client(settings: ExportSettings) -> ESClient:
    return ESClient(
        base_url=settings.url,
        username=settings.username,
        password=settings.password,
        api_key=settings.api_key,
        verify_tls=settings.verify_tls,
    )


def run(settings: ExportSettings) -> None:
    """Resolve -> dispatch -> materialize for already-validated settings."""
    with _build_client(settings) as client:
        response = dispatch_query(client, settings.index, settings.query)
    materialize(response, settings.output)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; the only place a failure becomes an exit code."""

    args = parse_args(argv)
    try:
        settings = resolve_settings(args)
        run(settings)
    except ExportError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return exc.exit_code
    return 0


def cli() -> None:
    sys.exit(main(sys.argv[1:]))


__all__ = ["main", "run", "cli"]
