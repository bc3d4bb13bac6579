"""Elasticsearch credential defaults read from a local, git-ignored JSON file.

Expected layout::

    {"elasticsearch": {"username": "...", "password": "...", "api_key": "...", "verify_tls": true}}
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

SECRETS_FILENAME = "local_secrets.json"
SECRETS_ENV_VAR = "LOCAL_SECRETS_FILE"
ES_SECTION = "elasticsearch"


def secrets_file(path: Optional[str | Path] = None) -> Path:
    """Explicit path first, then $LOCAL_SECRETS_FILE, then the file at the repo root."""

    if path:
        return Path(path).expanduser()
    from_env = os.getenv(SECRETS_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    return Path(__file__).resolve().parents[1] / SECRETS_FILENAME


def load_es_credentials(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Return the elasticsearch block; a missing or unreadable file yields {}."""

    target = secrets_file(path)
    if not target.is_file():
        return {}
    try:
        raw = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"[warn] ignoring unreadable secrets file {target}: {exc}", file=sys.stderr)
        return {}

    section = raw.get(ES_SECTION) if isinstance(raw, dict) else None
    return dict(section) if isinstance(section, dict) else {}


__all__ = ["SECRETS_FILENAME", "SECRETS_ENV_VAR", "secrets_file", "load_es_credentials"]
