"""Validation decorators for strict metadata parsers.

Strict parsers raise a plain :class:`ValueError` describing what is wrong with
a value. The decorator here binds that failure to the metadata field being
parsed, so callers always receive a :class:`~buildmeta.models.MetadataError`
naming the field and the offending raw value.
"""

from __future__ import annotations

__all__ = ("strict_field",)

import functools
import logging
from typing import TYPE_CHECKING, TypeVar, cast

from buildmeta.models import MetadataError

if TYPE_CHECKING:
    from collections.abc import Callable

R = TypeVar("R")

logger = logging.getLogger(__name__)


def strict_field(func: Callable[[str], R]) -> Callable[[str, str], R]:
    """Turn a single-value parser into a field-aware strict parser.

    The wrapped callable takes the field name first and the raw value second.

    Args:
        func: Parser that accepts a raw value and raises ``ValueError`` when it is malformed.

    Returns:
        Callable[[str, str], R]: Wrapped callable raising ``MetadataError`` instead of ``ValueError``.
    """

    @functools.wraps(func)
    def wrapper(field: str, value: str) -> R:
        try:
            result = func(value)
        except MetadataError:
            raise
        except ValueError as exc:
            raise MetadataError(field, value, str(exc) or None) from exc
        logger.debug("Parsed build metadata field %r: %r", field, result)
        return result

    return cast("Callable[[str, str], R]", wrapper)
