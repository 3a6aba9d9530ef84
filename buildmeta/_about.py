"""Package metadata.

This module stores release-related metadata for ``buildmeta`` itself and is
intentionally dependency-free. Values are re-exported from :mod:`buildmeta`
for convenience.
"""

from __future__ import annotations

from typing import Final

__all__ = (
    "__author__",
    "__copyright__",
    "__docs__",
    "__email__",
    "__issue_tracker__",
    "__license__",
    "__maintainer__",
    "__url__",
    "__version__",
)

__author__: Final[str] = "devzach"
__maintainer__: Final[str] = "devzach"
__copyright__: Final[str] = "2024-present, devzach"
__docs__: Final[str] = "https://github.com/buildmeta/buildmeta#readme"
__email__: Final[str] = "dev.zach@gmail.com"
__issue_tracker__: Final[str] = "https://github.com/buildmeta/buildmeta/issues"
__license__: Final[str] = "MIT"
__url__: Final[str] = "https://github.com/buildmeta/buildmeta"
__version__: Final[str] = "1.0.0"
