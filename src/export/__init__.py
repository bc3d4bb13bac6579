"""Single-query Elasticsearch export tool."""

from .runner import main, run

__all__ = ["main", "run"]
