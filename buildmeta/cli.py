"""Command-line entry point for buildmeta.

The CLI loads build metadata from ``BUILDMETA_*`` environment variables and
prints it to stdout as JSON. Malformed metadata is reported on stderr with a
non-zero exit status.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING

from . import _about  # pyright: ignore[reportPrivateUsage]
from .metadata import load
from .models import MetadataError

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ("main",)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildmeta",
        description="Print the build metadata found in BUILDMETA_* environment variables as JSON.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_about.__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log parsing details to stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print the loaded metadata and return the process exit status."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level="DEBUG",
            format="%(asctime)s.%(msecs)03d %(levelname)s %(module)s - %(funcName)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    try:
        metadata = load()
    except MetadataError as exc:
        sys.stderr.write(f"buildmeta: {exc}\n")
        return 1

    sys.stdout.write(json.dumps(metadata.as_dict(), indent=2) + "\n")
    return 0
