"""This module defines the Author class.

An author is the split form of a free-form author string such as
``"Jane Doe <jdoe@example.com>"``.
"""

from __future__ import annotations

__all__ = ("Author",)

from typing import NamedTuple

from typing_extensions import Self


class Author(NamedTuple):
    """A display name and email address pair.

    Attributes:
        name (str): Display name, empty when only an address was given.
        email (str): Email address, empty when no valid address was found.
    """

    name: str = ""
    email: str = ""

    def __str__(self: Self) -> str:
        """Return the author in ``Name <email>`` form, omitting missing parts."""
        if self.name and self.email:
            return f"{self.name} <{self.email}>"
        return self.name or self.email
