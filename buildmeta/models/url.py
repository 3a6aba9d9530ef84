"""This module defines the URL class.

The class is the validated, absolute form of a URL field. It mirrors the
pieces returned by :func:`urllib.parse.urlsplit`, with the host keeping its
port and the userinfo split out.
"""

from __future__ import annotations

__all__ = ("URL",)

from typing import NamedTuple
from urllib.parse import urlunsplit

from typing_extensions import Self


class URL(NamedTuple):
    """An absolute URL.

    Attributes:
        scheme (str): URL scheme, never empty.
        host (str): Host name including an optional ``:port`` suffix, never empty.
        path (str): Path component.
        query (str): Query string without the leading ``?``.
        fragment (str): Fragment without the leading ``#``.
        user (str): Userinfo without the trailing ``@``.
    """

    scheme: str
    host: str
    path: str = ""
    query: str = ""
    fragment: str = ""
    user: str = ""

    @property
    def netloc(self: Self) -> str:
        """Return the network location, including userinfo when present."""
        if self.user:
            return f"{self.user}@{self.host}"
        return self.host

    def __str__(self: Self) -> str:
        """Re-assemble the URL into its string form."""
        return urlunsplit((self.scheme, self.netloc, self.path, self.query, self.fragment))
