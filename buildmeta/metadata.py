"""Validated build metadata snapshot.

The :class:`~buildmeta.metadata.BuildMetadata` class is the single place the
raw strings are turned into typed values. :func:`load` parses every field
eagerly and returns an immutable snapshot, so a malformed strict field is
reported once, up front, as a :class:`~buildmeta.models.MetadataError`.
:func:`get_metadata` holds the process-wide snapshot read from the
environment.
"""

from __future__ import annotations

__all__ = ("BuildMetadata", "get_metadata", "load")

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from typing_extensions import Self

from . import constants
from .core import environment, parsers
from .models import MetadataError, RawMetadata

if TYPE_CHECKING:
    from datetime import datetime

    from .models import URL, Author, SemVer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuildMetadata:
    """Typed, validated build metadata.

    Free-text fields are exposed as-is through properties backed by
    :attr:`raw`. Every ``*_or`` method returns the given default only when the
    underlying raw value was empty.

    Attributes:
        raw: The unparsed input record.
        author_info: Author name and email split from ``raw.author``.
        author_url: Homepage URL of the author.
        date: Build time in UTC.
        development: Whether the application is a development build.
        docs: Documentation URL.
        license_url: URL of the license text.
        sha: Full git commit SHA.
        source: Source code URL.
        url: Application homepage URL.
        semver: Semantic version components of ``raw.version``.
    """

    raw: RawMetadata
    author_info: Author
    author_url: URL | None
    date: datetime | None
    development: bool
    docs: URL | None
    license_url: URL | None
    sha: str
    source: URL | None
    url: URL | None
    semver: SemVer

    @classmethod
    def from_raw(cls: type[Self], raw: RawMetadata) -> Self:
        """Parse and validate every field of ``raw``.

        Args:
            raw: The unparsed input record.

        Returns:
            BuildMetadata: The validated snapshot.

        Raises:
            MetadataError: If a strict field holds a malformed value.
        """
        return cls(
            raw=raw,
            author_info=parsers.parse_author(raw.author),
            author_url=parsers.parse_url("author_url", raw.author_url),
            date=parsers.parse_timestamp("date", raw.date),
            development=parsers.parse_bool("dev", raw.dev),
            docs=parsers.parse_url("docs", raw.docs),
            license_url=parsers.parse_url("license_url", raw.license_url),
            sha=parsers.parse_sha("sha", raw.sha),
            source=parsers.parse_url("src", raw.src),
            url=parsers.parse_url("url", raw.url),
            semver=parsers.parse_semver(raw.version),
        )

    # Author

    @property
    def author(self: Self) -> str:
        """Name of the application author."""
        return self.author_info.name

    def author_or(self: Self, default: str) -> str:
        """Return the author name, or ``default`` if not set."""
        return self.author or default

    @property
    def author_email(self: Self) -> str:
        """Email address of the application author."""
        return self.author_info.email

    def author_email_or(self: Self, default: str) -> str:
        """Return the author email address, or ``default`` if not set."""
        return self.author_email or default

    def author_url_or(self: Self, default: str) -> URL | None:
        """Return the author homepage URL, or ``default`` parsed as a URL if not set."""
        if self.author_url is None:
            return parsers.parse_url("author_url", default)
        return self.author_url

    # Free text

    @property
    def copyright(self: Self) -> str:
        """Copyright line of the application."""
        return self.raw.copyright

    def copyright_or(self: Self, default: str) -> str:
        """Return the copyright line, or ``default`` if not set."""
        return self.copyright or default

    @property
    def description(self: Self) -> str:
        """Description of the application."""
        return self.raw.desc

    def description_or(self: Self, default: str) -> str:
        """Return the description, or ``default`` if not set."""
        return self.description or default

    @property
    def license(self: Self) -> str:
        """License identifier of the application."""
        return self.raw.license

    def license_or(self: Self, default: str) -> str:
        """Return the license identifier, or ``default`` if not set."""
        return self.license or default

    @property
    def name(self: Self) -> str:
        """Name of the application."""
        return self.raw.name

    def name_or(self: Self, default: str) -> str:
        """Return the application name, or ``default`` if not set."""
        return self.name or default

    @property
    def note(self: Self) -> str:
        """Arbitrary build note."""
        return self.raw.note

    def note_or(self: Self, default: str) -> str:
        """Return the build note, or ``default`` if not set."""
        return self.note or default

    @property
    def title(self: Self) -> str:
        """Title of the application."""
        return self.raw.title

    def title_or(self: Self, default: str) -> str:
        """Return the application title, or ``default`` if not set."""
        return self.title or default

    # Date

    def date_or(self: Self, default: datetime) -> datetime:
        """Return the build time, or ``default`` if not set."""
        if self.date is None:
            return default
        return self.date

    def date_format(self: Self, layout: str) -> str:
        """Format the build time with a :meth:`~datetime.datetime.strftime` layout.

        Args:
            layout: Format string, e.g. ``"%Y-%m-%d"``.

        Returns:
            str: The formatted build time, or an empty string if not set.
        """
        return self.date_format_or(layout, "")

    def date_format_or(self: Self, layout: str, default: str) -> str:
        """Format the build time with ``layout``, or return ``default`` if not set."""
        if self.date is None:
            return default
        return self.date.strftime(layout)

    # URLs

    def docs_or(self: Self, default: str) -> URL | None:
        """Return the documentation URL, or ``default`` parsed as a URL if not set."""
        if self.docs is None:
            return parsers.parse_url("docs", default)
        return self.docs

    def license_url_or(self: Self, default: str) -> URL | None:
        """Return the license URL, or ``default`` parsed as a URL if not set."""
        if self.license_url is None:
            return parsers.parse_url("license_url", default)
        return self.license_url

    def source_or(self: Self, default: str) -> URL | None:
        """Return the source code URL, or ``default`` parsed as a URL if not set."""
        if self.source is None:
            return parsers.parse_url("src", default)
        return self.source

    def url_or(self: Self, default: str) -> URL | None:
        """Return the homepage URL, or ``default`` parsed as a URL if not set."""
        if self.url is None:
            return parsers.parse_url("url", default)
        return self.url

    # SHA

    def sha_or(self: Self, default: str) -> str:
        """Return the git SHA, or ``default`` if not set."""
        return self.sha or default

    @property
    def short_sha(self: Self) -> str:
        """First seven characters of the git SHA, or an empty string if not set."""
        return self.sha[: constants.SHORT_SHA_LENGTH]

    def short_sha_or(self: Self, default: str) -> str:
        """Return the short git SHA, or the first seven characters of ``default`` if not set."""
        return self.sha_or(default)[: constants.SHORT_SHA_LENGTH]

    # Version

    @property
    def version(self: Self) -> str:
        """Version slug of the application, unparsed."""
        return self.raw.version

    def version_or(self: Self, default: str) -> str:
        """Return the version slug, or ``default`` if not set."""
        return self.version or default

    @property
    def version_major(self: Self) -> str:
        """Semantic version major component."""
        return self.semver.major

    @property
    def version_minor(self: Self) -> str:
        """Semantic version minor component."""
        return self.semver.minor

    @property
    def version_patch(self: Self) -> str:
        """Semantic version patch component."""
        return self.semver.patch

    @property
    def version_pre_release(self: Self) -> str:
        """Semantic version pre-release identifiers."""
        return self.semver.pre_release

    @property
    def version_build(self: Self) -> str:
        """Semantic version build metadata identifiers."""
        return self.semver.build

    # Runtime environment

    @property
    def arch(self: Self) -> str:
        """Architecture of the machine the application is running on."""
        return environment.arch()

    @property
    def os(self: Self) -> str:
        """Operating system the application is running on."""
        return environment.os_name()

    @property
    def python(self: Self) -> str:
        """Version of the Python interpreter the application is running on."""
        return environment.python_version()

    def as_dict(self: Self) -> dict[str, Any]:
        """Return the metadata as JSON-ready primitives.

        URLs are rendered as strings and the build time in RFC 3339 form with a
        ``Z`` suffix, keeping any fractional seconds. Unset URLs and dates are
        ``None``.
        """
        return {
            "arch": self.arch,
            "author": self.author,
            "author_email": self.author_email,
            "author_url": _url_str(self.author_url),
            "copyright": self.copyright,
            "date": None if self.date is None else self.date.isoformat().replace("+00:00", "Z"),
            "description": self.description,
            "development": self.development,
            "docs": _url_str(self.docs),
            "license": self.license,
            "license_url": _url_str(self.license_url),
            "name": self.name,
            "note": self.note,
            "os": self.os,
            "python": self.python,
            "sha": self.sha,
            "short_sha": self.short_sha,
            "source": _url_str(self.source),
            "title": self.title,
            "url": _url_str(self.url),
            "version": self.version,
            "version_major": self.version_major,
            "version_minor": self.version_minor,
            "version_patch": self.version_patch,
            "version_pre_release": self.version_pre_release,
            "version_build": self.version_build,
        }


def _url_str(url: URL | None) -> str | None:
    return None if url is None else str(url)


def load(raw: RawMetadata | Mapping[str, str | None] | None = None) -> BuildMetadata:
    """Load and validate build metadata.

    Args:
        raw: Raw input record, or a field name to value mapping. Defaults to
            reading ``BUILDMETA_*`` environment variables.

    Returns:
        BuildMetadata: The validated snapshot.

    Raises:
        MetadataError: If a strict field holds a malformed value, or a mapping
            key is not a recognised field name.
    """
    if raw is None:
        raw = RawMetadata.from_environ()
    elif isinstance(raw, Mapping):
        raw = RawMetadata.from_mapping(raw)

    metadata = BuildMetadata.from_raw(raw)
    logger.debug("Loaded build metadata for %r (version %r).", metadata.name, metadata.version)
    return metadata


_lock = threading.Lock()
_metadata: BuildMetadata | None = None
_error: MetadataError | None = None


def get_metadata() -> BuildMetadata:
    """Return the process-wide build metadata, loading it from the environment once.

    The first call parses ``BUILDMETA_*`` environment variables; every later
    call returns the same snapshot. A failed load is remembered and re-raised
    without parsing again.

    Returns:
        BuildMetadata: The process-wide snapshot.

    Raises:
        MetadataError: If a strict field holds a malformed value.
    """
    global _metadata, _error  # noqa: PLW0603

    with _lock:
        if _metadata is None and _error is None:
            try:
                _metadata = load()
            except MetadataError as exc:
                _error = exc
        if _error is not None:
            # Drop frames from earlier raises so the traceback stays bounded.
            raise _error.with_traceback(None)
        return cast("BuildMetadata", _metadata)
