"""This module defines the SemVer class.

See https://semver.org for the grammar the components are captured from.
"""

from __future__ import annotations

__all__ = ("SemVer",)

from typing import NamedTuple

from typing_extensions import Self


class SemVer(NamedTuple):
    """The five components of a semantic version, kept as strings.

    All fields are empty together when the source string is not a semantic
    version.

    Attributes:
        major (str): Major version digits.
        minor (str): Minor version digits.
        patch (str): Patch version digits.
        pre_release (str): Dot-separated pre-release identifiers.
        build (str): Dot-separated build metadata identifiers.
    """

    major: str = ""
    minor: str = ""
    patch: str = ""
    pre_release: str = ""
    build: str = ""

    def is_empty(self: Self) -> bool:
        """Return ``True`` when no component was captured."""
        return not any(self)
