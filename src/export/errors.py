"""Typed failures raised by the export workflow and mapped to exit codes in the runner."""

from __future__ import annotations


class ExportError(Exception):
    """Base class for every terminal failure of an export run."""

    exit_code = 1


class MissingArgument(ExportError):
    """A required command-line flag was not supplied."""

    exit_code = 1

    def __init__(self, short: str, long: str, purpose: str) -> None:
        super().__init__(f"Missing Argument, {short} or {long} must be provided for {purpose}")
        self.flag = long


class MalformedQuery(ExportError):
    """The query payload is not well-formed JSON."""

    exit_code = 3


class TransportError(ExportError):
    """The search endpoint could not be reached or the request failed in flight."""

    exit_code = 4


class FileWriteError(ExportError):
    """The output file could not be created or written."""

    exit_code = 5


__all__ = [
    "ExportError",
    "MissingArgument",
    "MalformedQuery",
    "TransportError",
    "FileWriteError",
]
