"""Minimal Elasticsearch client wrapper used by the export workflow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .config import SEARCH_FROM, SEARCH_SIZE
from .errors import TransportError


@dataclass(frozen=True)
class SearchResponse:
    """Status code and untouched body bytes of one search call."""

    status_code: int
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class ESClient:
    """Thin wrapper around the Elasticsearch HTTP API bound to a single node."""

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        api_key: Optional[str] = None,
        verify_tls: bool = True,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self.verify = bool(verify_tls)

        if api_key:
            self.session.headers["Authorization"] = f"ApiKey {api_key}"
        elif username and password:
            self.session.auth = (username, password)

    def _url(self, path: str) -> str:
        path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{path}"

    def search(
        self,
        index: str,
        body: Dict[str, Any],
        from_: int = SEARCH_FROM,
        size: int = SEARCH_SIZE,
    ) -> SearchResponse:
        """POST one _search request scoped to `index` and return the raw response.

        The index pattern is passed through as-is (wildcards and comma lists are
        expanded by Elasticsearch). Any HTTP status is returned to the caller;
        only failures to complete the exchange raise TransportError.
        """

        url = self._url(f"{quote(index, safe='*,')}/_search")
        try:
            response = self.session.post(
                url,
                params={"from": from_, "size": size},
                json=body,
                verify=self.verify,
            )
        except requests.RequestException as exc:
            raise TransportError(f"search request to {url} failed: {exc}") from exc
        return SearchResponse(status_code=response.status_code, content=response.content)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ESClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["ESClient", "SearchResponse"]
