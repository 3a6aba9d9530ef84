"""Runtime environment lookups.

Unlike the build metadata fields, these values come from the interpreter
and host the program is running on.
"""

from __future__ import annotations

__all__ = ("arch", "os_name", "python_version")

import platform


def arch() -> str:
    """Return the machine architecture, e.g. ``"x86_64"`` or ``"arm64"``."""
    return platform.machine()


def os_name() -> str:
    """Return the lower-cased operating system name, e.g. ``"linux"``."""
    return platform.system().lower()


def python_version() -> str:
    """Return the version of the running Python interpreter."""
    return platform.python_version()
