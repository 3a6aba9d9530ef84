"""The core package of buildmeta holds the parsing and validation layer.

Modules:
- decorators: ``strict_field``, binding parser failures to a field name.
- environment: facts about the running interpreter and host.
- parsers: the author, boolean, SHA, timestamp, URL and semantic version parsers.
"""

__all__ = (
    "arch",
    "is_email_address",
    "os_name",
    "parse_author",
    "parse_bool",
    "parse_semver",
    "parse_sha",
    "parse_timestamp",
    "parse_url",
    "python_version",
    "strict_field",
)


from .decorators import strict_field
from .environment import arch, os_name, python_version
from .parsers import (
    is_email_address,
    parse_author,
    parse_bool,
    parse_semver,
    parse_sha,
    parse_timestamp,
    parse_url,
)
