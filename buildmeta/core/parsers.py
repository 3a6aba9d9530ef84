"""Parsers for raw build metadata strings.

Two families live here. The strict parsers (boolean, SHA, timestamp and URL)
are wrapped with :func:`~buildmeta.core.decorators.strict_field` and raise
:class:`~buildmeta.models.MetadataError` for malformed input. The best-effort
parsers (author and semantic version) never raise and degrade to a defined
fallback instead.

Every parser maps the empty string to its "not set" result.
"""

from __future__ import annotations

__all__ = (
    "is_email_address",
    "parse_author",
    "parse_bool",
    "parse_semver",
    "parse_sha",
    "parse_timestamp",
    "parse_url",
)

import logging
from datetime import datetime, timedelta, timezone
from email.utils import parseaddr
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from buildmeta import constants
from buildmeta.models import URL, Author, SemVer

from .decorators import strict_field

if TYPE_CHECKING:
    import re

logger = logging.getLogger(__name__)


def is_email_address(value: str) -> bool:
    """Return ``True`` when ``value`` is a bare ``local-part@domain`` address.

    Args:
        value: Candidate address without any display name or angle brackets.

    Returns:
        bool: Whether the candidate parses as exactly one address.
    """
    if not value or any(char.isspace() or char in "<>" for char in value):
        return False
    display_name, address = parseaddr(value)
    if display_name or address != value:
        return False
    local_part, _, domain = address.rpartition("@")
    return bool(local_part) and bool(domain)


def parse_author(value: str) -> Author:
    """Split a free-form author string into a display name and an email address.

    Accepted forms are ``"Name"``, ``"user@example.com"``, ``"<user@example.com>"``
    and ``"Name <user@example.com>"``. Anything else is kept whole as the name.

    Args:
        value: Raw author string.

    Returns:
        Author: The best-effort split.
    """
    if not value:
        return Author()

    if match := constants.AUTHOR_BRACKET_PATTERN.match(value):
        email = match.group("email")
        if is_email_address(email):
            return Author(match.group("name").strip(), email)
        logger.debug("Bracketed author address %r is not valid; keeping %r as the name.", email, value)
        return Author(value, "")

    if is_email_address(value.strip()):
        return Author("", value.strip())

    return Author(value, "")


@strict_field
def parse_bool(value: str) -> bool:
    """Parse a case-insensitive ``"true"``/``"false"`` flag. Empty is ``False``."""
    if not value:
        return False
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    msg = "expected 'true' or 'false'"
    raise ValueError(msg)


@strict_field
def parse_sha(value: str) -> str:
    """Validate a full git commit SHA and return it unchanged.

    Args:
        value: Raw SHA, empty or exactly 40 hexadecimal digits.

    Returns:
        str: The input, unchanged.

    Raises:
        ValueError: If the value has the wrong length or contains a non-hex character.
    """
    if not value:
        return ""
    if len(value) != constants.SHA_LENGTH:
        msg = f"expected {constants.SHA_LENGTH} characters, got {len(value)}"
        raise ValueError(msg)
    if not constants.SHA_PATTERN.fullmatch(value):
        msg = "expected only hexadecimal digits"
        raise ValueError(msg)
    return value


def _timestamp_from_match(match: re.Match[str]) -> datetime:
    """Build a UTC instant from the named groups of a timestamp pattern match."""
    groups = match.groupdict()
    if groups.get("month_name") is not None:
        if groups["weekday"] not in constants.WEEKDAY_NAMES or groups["month_name"] not in constants.MONTH_NAMES:
            msg = "unrecognised weekday or month name"
            raise ValueError(msg)
        month = constants.MONTH_NAMES.index(groups["month_name"]) + 1
    else:
        month = int(groups["month"])

    offset = timedelta(0)
    if groups.get("utc") is None:
        offset = timedelta(hours=int(groups["offset_hour"]), minutes=int(groups["offset_minute"]))
        if groups["sign"] == "-":
            offset = -offset

    parsed = datetime(
        int(groups["year"]),
        month,
        int(groups["day"]),
        int(groups["hour"]),
        int(groups["minute"]),
        int(groups["second"]),
        int((groups.get("fraction") or "0").ljust(6, "0")),
        tzinfo=timezone(offset),
    )
    return parsed.astimezone(timezone.utc)


@strict_field
def parse_timestamp(value: str) -> datetime | None:
    """Parse a build timestamp and normalise it to UTC.

    The patterns in :data:`buildmeta.constants.TIMESTAMP_PATTERNS` are tried
    in order and must match the whole value; all of them require an explicit
    zone. Weekday and month names are always English.

    Args:
        value: Raw timestamp, e.g. ``"Fri, 23 Aug 2019 11:00:00 -0700"`` or ``"2019-08-23T18:00:00Z"``.

    Returns:
        datetime | None: Timezone-aware UTC instant, or ``None`` when the value is empty.

    Raises:
        ValueError: If no layout matches, or a field is out of range.
    """
    if not value:
        return None
    for pattern in constants.TIMESTAMP_PATTERNS:
        if match := pattern.fullmatch(value):
            return _timestamp_from_match(match)
    msg = "unrecognised timestamp format"
    raise ValueError(msg)


@strict_field
def parse_url(value: str) -> URL | None:
    """Parse an absolute URL.

    Args:
        value: Raw URL, e.g. ``"https://example.com/demo"``.

    Returns:
        URL | None: The parsed URL, or ``None`` when the value is empty.

    Raises:
        ValueError: If the URL is malformed or lacks a scheme or host.
    """
    if not value:
        return None
    # urlsplit strips whitespace and control characters instead of rejecting them.
    if constants.URL_FORBIDDEN_PATTERN.search(value):
        msg = "contains whitespace or control characters"
        raise ValueError(msg)
    if constants.URL_BAD_ESCAPE_PATTERN.search(value):
        msg = "invalid percent-escape"
        raise ValueError(msg)

    parts = urlsplit(value)
    if not parts.scheme:
        msg = "missing scheme"
        raise ValueError(msg)
    if not parts.hostname:
        msg = "missing host"
        raise ValueError(msg)
    user, _, host = parts.netloc.rpartition("@")
    if not constants.URL_HOST_PATTERN.fullmatch(host):
        msg = f"invalid host {host!r}"
        raise ValueError(msg)
    # Accessing the port validates it.
    _ = parts.port

    return URL(
        scheme=parts.scheme,
        host=host,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
        user=user,
    )


def parse_semver(value: str) -> SemVer:
    """Split a version string into its semantic version components.

    A single leading ``"v"`` is ignored. Strings that are not semantic
    versions (``"latest"``, ``"1.2"``, ``"1.2.3.4"``) yield an empty
    :class:`~buildmeta.models.SemVer` rather than an error.

    Args:
        value: Raw version string.

    Returns:
        SemVer: The captured components, or all-empty components.
    """
    if not value:
        return SemVer()

    match = constants.SEMVER_PATTERN.fullmatch(value.removeprefix("v"))
    if match is None:
        logger.debug("Version %r is not a semantic version.", value)
        return SemVer()

    return SemVer(
        major=match.group("major"),
        minor=match.group("minor"),
        patch=match.group("patch"),
        pre_release=match.group("pre_release") or "",
        build=match.group("build") or "",
    )
