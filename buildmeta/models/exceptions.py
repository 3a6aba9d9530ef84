"""Exception classes used across buildmeta.

A single error type reports malformed build metadata. It names the offending
field and carries the raw value so that a broken build can be traced back to
the flag or variable that produced it.
"""

from __future__ import annotations

__all__ = ("MetadataError",)

from typing import Final

from typing_extensions import Self

_INVALID_FIELD_MESSAGE: Final[str] = "Invalid value for build metadata field {field!r}: {value!r}."
_INVALID_FIELD_REASON_MESSAGE: Final[str] = "Invalid value for build metadata field {field!r}: {value!r} ({reason})."


class MetadataError(ValueError):
    """Raised when a strict build metadata field holds a malformed value.

    Attributes:
        field: Name of the field that failed validation.
        value: Raw value supplied for the field.
        reason: Optional description of why the value was rejected.
    """

    def __init__(self: Self, field: str, value: str, reason: str | None = None) -> None:
        """Initialise the error with the offending field and value.

        Args:
            field: Name of the field that failed validation.
            value: Raw value supplied for the field.
            reason: Optional description of why the value was rejected.
        """
        self.field: str = field
        self.value: str = value
        self.reason: str | None = reason
        if reason:
            message = _INVALID_FIELD_REASON_MESSAGE.format(field=field, value=value, reason=reason)
        else:
            message = _INVALID_FIELD_MESSAGE.format(field=field, value=value)
        super().__init__(message)
