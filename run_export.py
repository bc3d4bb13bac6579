"""Convenience shim to run the export tool without installing it."""

from __future__ import annotations

import sys

from src.export.runner import main as export_main


if __name__ == "__main__":
    sys.exit(export_main(sys.argv[1:]))
