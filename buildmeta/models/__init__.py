"""Data structures and domain exceptions used by buildmeta.

This package centralises the small immutable records produced by the parsers,
the raw input record, and the project-specific exception type.
"""

from __future__ import annotations

__all__ = (
    "URL",
    "Author",
    "MetadataError",
    "RawMetadata",
    "SemVer",
)

from .author import Author
from .exceptions import MetadataError
from .raw_metadata import RawMetadata
from .semver import SemVer
from .url import URL
