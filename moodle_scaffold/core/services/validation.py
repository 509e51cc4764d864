"""
Answer validation — per-prompt checks before a value is accepted.

Every validator has the same shape so the I/O layer can loop on it::

    accepted, value_or_reason = validator(answer)

On acceptance the second element is the (possibly normalised) value
to keep; on rejection it is the message shown before re-prompting.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

# RFC 3986 scheme: letter, then letters / digits / "+" / "-" / "."
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")

# Host: hostname labels, IPv4, or a bracketed IPv6 literal
_HOST_RE = re.compile(r"^(\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9_]([A-Za-z0-9_-]*[A-Za-z0-9_])?(\.[A-Za-z0-9_]([A-Za-z0-9_-]*[A-Za-z0-9_])?)*\.?)$")


def validate_database_name(answer: str) -> tuple[bool, str]:
    """Database name must be non-empty."""
    if not answer:
        return False, "Database name cannot be empty."
    return True, answer


def is_valid_url(value: str) -> bool:
    """Whether ``value`` is a syntactically valid absolute URL with a host."""
    if not value or any(ch.isspace() or ord(ch) < 0x20 for ch in value):
        return False

    try:
        parts = urlsplit(value)
        port = parts.port  # raises on a non-numeric or out-of-range port
    except ValueError:
        return False

    if not _SCHEME_RE.match(parts.scheme) or not parts.netloc:
        return False

    host = parts.netloc.rpartition("@")[2]
    if port is not None or host.endswith(":"):
        host = host.rsplit(":", 1)[0]
    return bool(_HOST_RE.match(host))


def validate_wwwroot(answer: str) -> tuple[bool, str]:
    """Web root must be a valid URL; trailing slashes are stripped."""
    if not answer or not is_valid_url(answer):
        return False, "Please enter a valid URL for the web root."
    return True, answer.rstrip("/")
