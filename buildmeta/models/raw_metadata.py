"""Raw build metadata dataclass.

The :class:`~buildmeta.models.raw_metadata.RawMetadata` model holds the
unparsed strings handed over by the build. It is populated once, from a
mapping or from ``BUILDMETA_*`` environment variables, and never mutated.
"""

from __future__ import annotations

__all__ = ("RawMetadata",)

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from buildmeta.constants import ENV_PREFIX, FIELD_NAMES

from .exceptions import MetadataError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from typing_extensions import Self

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawMetadata:
    """Unparsed build metadata strings. Empty means "not set".

    Attributes:
        author: Author name and/or email address.
        author_url: Homepage URL of the author.
        copyright: Copyright line.
        date: Build timestamp.
        desc: Longer description of the application.
        dev: Development flag, ``"true"`` or ``"false"``.
        docs: Documentation URL.
        license: SPDX license identifier.
        license_url: URL of the license text.
        name: Application name.
        note: Arbitrary build note.
        sha: Full 40 character git commit SHA.
        src: Source code URL.
        title: Application title.
        url: Application homepage URL.
        version: Version slug, typically a semantic version.
    """

    author: str = ""
    author_url: str = ""
    copyright: str = ""
    date: str = ""
    desc: str = ""
    dev: str = ""
    docs: str = ""
    license: str = ""
    license_url: str = ""
    name: str = ""
    note: str = ""
    sha: str = ""
    src: str = ""
    title: str = ""
    url: str = ""
    version: str = ""

    @classmethod
    def from_mapping(cls: type[Self], values: Mapping[str, str | None]) -> Self:
        """Build raw metadata from a field name to value mapping.

        Args:
            values: Raw values keyed by field name. ``None`` counts as empty.

        Returns:
            RawMetadata: The populated record.

        Raises:
            MetadataError: If a key is not a recognised field name.
        """
        for key in values:
            if key not in FIELD_NAMES:
                raise MetadataError(key, str(values[key]), "unknown field")
        return cls(**{key: value or "" for key, value in values.items()})

    @classmethod
    def from_environ(cls: type[Self], environ: Mapping[str, str] | None = None, prefix: str = ENV_PREFIX) -> Self:
        """Build raw metadata from ``<prefix><FIELD>`` environment variables.

        Args:
            environ: Environment to read. Defaults to :data:`os.environ`.
            prefix: Variable name prefix. Defaults to ``"BUILDMETA_"``.

        Returns:
            RawMetadata: The populated record. Unrelated variables are ignored.
        """
        if environ is None:
            environ = os.environ
        values = {field: environ.get(prefix + field.upper(), "") for field in FIELD_NAMES}
        logger.debug("Read %d build metadata variables with prefix %r.", sum(map(bool, values.values())), prefix)
        return cls(**values)
