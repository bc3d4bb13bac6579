"""Query parsing and the single search round-trip."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict

from .client import ESClient, SearchResponse
from .config import SEARCH_FROM, SEARCH_SIZE
from .errors import MalformedQuery


def _reject_constant(name: str) -> Any:
    raise MalformedQuery(f"query is not valid JSON: {name} is not a JSON value")


def parse_query(text: str) -> Dict[str, Any]:
    """Decode the query payload; the document is otherwise forwarded untouched."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedQuery(f"query is not valid JSON: {exc}") from exc


def dispatch_query(client: ESClient, index: str, query_text: str) -> SearchResponse:
    """Parse `query_text` first, then issue exactly one search against `index`."""
    body = parse_query(query_text)
    print(
        f"[info] searching {index} on {client.base_url} (from={SEARCH_FROM}, size={SEARCH_SIZE})",
        file=sys.stderr,
    )
    return client.search(index, body, from_=SEARCH_FROM, size=SEARCH_SIZE)


__all__ = ["parse_query", "dispatch_query"]
