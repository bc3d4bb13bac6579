"""Write a search response to stdout or verbatim to a file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from .client import SearchResponse
from .errors import FileWriteError


def format_console_result(response: SearchResponse) -> str:
    return f"result: {response.status_code}, body\n{response.text}"


def write_body(path: Path, response: SearchResponse) -> int:
    """Create or truncate `path` and write the body bytes; returns bytes written."""
    try:
        with path.open("wb") as handle:
            return handle.write(response.content)
    except OSError as exc:
        raise FileWriteError(f"cannot write output file {path}: {exc}") from exc


def materialize(response: SearchResponse, output: Optional[Path] = None) -> None:
    if output is None:
        print(format_console_result(response))
        return

    written = write_body(output, response)
    print(f"[info] result {response.status_code}: wrote {written} bytes to {output}", file=sys.stderr)


__all__ = ["format_console_result", "write_body", "materialize"]
