"""Configuration helpers for the single-query export workflow."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from src.secrets import load_es_credentials

from .errors import MissingArgument

PROG_NAME = "es2csv"
VERSION = "0.1.0"

# Fixed result window; subsequent pages are never requested.
SEARCH_FROM = 0
SEARCH_SIZE = 10

_ES_SECRETS = load_es_credentials()

DEFAULT_ES_USERNAME: Optional[str] = _ES_SECRETS.get("username")
DEFAULT_ES_PASSWORD: Optional[str] = _ES_SECRETS.get("password")
DEFAULT_ES_API_KEY: Optional[str] = _ES_SECRETS.get("api_key") or None
DEFAULT_VERIFY_TLS = bool(_ES_SECRETS.get("verify_tls", True))

# (dest, short flag, long flag, what the value names)
REQUIRED_FLAGS = (
    ("url", "-u", "--url", "ES Node"),
    ("index", "-i", "--index", "ES Index"),
    ("query", "-q", "--query", "ES Query"),
)

EXIT_CODES_EPILOG = (
    "exit codes: 0 success, 1 missing argument, 2 invalid command line, "
    "3 malformed query, 4 transport error, 5 output file error"
)


@dataclass(frozen=True)
class ExportSettings:
    """Resolved runtime settings for one export invocation."""

    url: str
    index: str
    query: str
    output: Optional[Path]
    username: Optional[str]
    password: Optional[str]
    api_key: Optional[str]
    verify_tls: bool


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the export entry point."""

    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Run one query against an Elasticsearch node and print or save the raw response.",
        epilog=EXIT_CODES_EPILOG,
    )
    parser.add_argument("-u", "--url", help="The elastic node e.g. -u 'http://myelastic:9200'")
    parser.add_argument("-i", "--index", help="Index name, like -i 'tweets_2020_05_*'")
    parser.add_argument(
        "-q",
        "--query",
        help='ES Query, like -q \'{ "query": { "match_all": {} } }\'',
    )
    parser.add_argument("-o", "--output", help="Output filename, e.g -o some.csv (stdout when omitted)")
    parser.add_argument("--username", default=DEFAULT_ES_USERNAME)
    parser.add_argument("--password", default=DEFAULT_ES_PASSWORD)
    parser.add_argument("--api-key", default=DEFAULT_ES_API_KEY)
    parser.add_argument(
        "--verify-tls",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_VERIFY_TLS,
        help="Check TLS certificates (default: on unless local secrets say otherwise)",
    )
    parser.add_argument("--version", action="version", version=f"{PROG_NAME} {VERSION}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> ExportSettings:
    """Return immutable settings, raising MissingArgument for the first absent required flag."""

    for dest, short, long, purpose in REQUIRED_FLAGS:
        if not getattr(args, dest, None):
            raise MissingArgument(short, long, purpose)
    if args.output is not None and not args.output:
        raise MissingArgument("-o", "--output", "Output filename (omit the flag to print to stdout)")

    return ExportSettings(
        url=args.url,
        index=args.index,
        query=args.query,
        output=Path(args.output) if args.output is not None else None,
        username=args.username,
        password=args.password,
        api_key=args.api_key or None,
        verify_tls=bool(args.verify_tls),
    )


__all__ = [
    "PROG_NAME",
    "VERSION",
    "SEARCH_FROM",
    "SEARCH_SIZE",
    "DEFAULT_ES_USERNAME",
    "DEFAULT_ES_PASSWORD",
    "DEFAULT_ES_API_KEY",
    "DEFAULT_VERIFY_TLS",
    "ExportSettings",
    "build_arg_parser",
    "parse_args",
    "resolve_settings",
]
