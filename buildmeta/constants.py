"""Shared constants.

The :mod:`buildmeta.constants` module centralizes the recognised field names,
the environment variable prefix, and the patterns the parsers match against.
"""

from __future__ import annotations

import re
from typing import Final

__all__ = (
    "AUTHOR_BRACKET_PATTERN",
    "ENV_PREFIX",
    "FIELD_NAMES",
    "MONTH_NAMES",
    "SEMVER_PATTERN",
    "SHA_LENGTH",
    "SHA_PATTERN",
    "SHORT_SHA_LENGTH",
    "TIMESTAMP_PATTERNS",
    "URL_BAD_ESCAPE_PATTERN",
    "URL_FORBIDDEN_PATTERN",
    "URL_HOST_PATTERN",
    "WEEKDAY_NAMES",
)

ENV_PREFIX: Final[str] = "BUILDMETA_"

FIELD_NAMES: Final[tuple[str, ...]] = (
    "author",
    "author_url",
    "copyright",
    "date",
    "desc",
    "dev",
    "docs",
    "license",
    "license_url",
    "name",
    "note",
    "sha",
    "src",
    "title",
    "url",
    "version",
)

# Git SHA
SHA_LENGTH: Final[int] = 40
SHORT_SHA_LENGTH: Final[int] = 7
SHA_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9a-fA-F]{40}")

# Timestamp layouts, tried in order: RFC 1123 with a numeric zone, then
# RFC 3339 with "Z" or "+HH:MM", then the same with "+HHMM".
_CLOCK: Final[str] = r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
_DATE: Final[str] = r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
_FRACTION: Final[str] = r"(?:\.(?P<fraction>[0-9]{1,6}))?"
TIMESTAMP_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(
        r"(?P<weekday>[A-Z][a-z]{2}), (?P<day>[0-9]{2}) (?P<month_name>[A-Z][a-z]{2}) (?P<year>[0-9]{4}) "
        rf"{_CLOCK} (?P<sign>[+-])(?P<offset_hour>[0-9]{{2}})(?P<offset_minute>[0-5][0-9])"
    ),
    re.compile(
        rf"{_DATE}T{_CLOCK}{_FRACTION}"
        r"(?:(?P<utc>Z)|(?P<sign>[+-])(?P<offset_hour>[0-9]{2}):(?P<offset_minute>[0-5][0-9]))"
    ),
    re.compile(
        rf"{_DATE}T{_CLOCK}{_FRACTION}"
        r"(?P<sign>[+-])(?P<offset_hour>[0-9]{2})(?P<offset_minute>[0-5][0-9])"
    ),
)
WEEKDAY_NAMES: Final[tuple[str, ...]] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Only the trailing ``<...>`` group is considered the address.
AUTHOR_BRACKET_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?P<name>.*?)\s*<(?P<email>[^<>]*)>\s*$")

# URL syntax checks applied before splitting (RFC 3986).
URL_FORBIDDEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\x00-\x20\x7f]|\s")
URL_BAD_ESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"%(?![0-9A-Fa-f]{2})")
URL_HOST_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9\-._~!$&'()*+,;=%]+)(?::[0-9]*)?"
)

_IDENTIFIERS: Final[str] = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
SEMVER_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)"
    rf"(?:-(?P<pre_release>{_IDENTIFIERS}))?"
    rf"(?:\+(?P<build>{_IDENTIFIERS}))?"
)
