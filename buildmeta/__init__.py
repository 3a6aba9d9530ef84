"""Build-time application metadata for a running program.

Importing this package has no side effects. Call :func:`load` with a mapping
of raw values, or :func:`get_metadata` for the process-wide snapshot read from
``BUILDMETA_*`` environment variables; both validate every field up front.
"""

from __future__ import annotations

from ._about import (
    __author__,
    __copyright__,
    __docs__,
    __email__,
    __issue_tracker__,
    __license__,
    __maintainer__,
    __url__,
    __version__,
)
from .metadata import BuildMetadata, get_metadata, load
from .models import URL, Author, MetadataError, RawMetadata, SemVer

__all__ = (
    "URL",
    "Author",
    "BuildMetadata",
    "MetadataError",
    "RawMetadata",
    "SemVer",
    "__author__",
    "__copyright__",
    "__docs__",
    "__email__",
    "__issue_tracker__",
    "__license__",
    "__maintainer__",
    "__url__",
    "__version__",
    "get_metadata",
    "load",
)
