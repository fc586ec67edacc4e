# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""URL parsing and domain normalisation.

``parse_url`` is strict where ``urllib.parse`` is lenient: a candidate URL
must carry a scheme and a host, or ``InvalidUrlError`` is raised. Callers
that must never raise (``classify``, ``is_profile_url``) catch it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from .errors import InvalidUrlError

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*$")
_FORBIDDEN_HOST_CHARS = re.compile(r"[\s<>\"{}|\\^`/?#@%\x00-\x1f\x7f]")
_TAB_NEWLINE_RE = re.compile(r"[\t\n\r]")
_SCHEME_PREFIX_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")

# Schemes for which browsers read a backslash as "/".
_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "file"})


@dataclass(frozen=True, slots=True)
class ParsedUrl:
    hostname: str  # lowercase, as written (may start with "www.")
    domain: str  # hostname without leading "www."
    pathname: str  # never empty; "/" for bare hosts


def normalize_domain(domain: str) -> str:
    """Lowercase and drop one leading ``www.``."""
    domain = domain.strip().lower()
    return domain[4:] if domain.startswith("www.") else domain


def parse_url(url: str) -> ParsedUrl:
    if not isinstance(url, str):
        raise InvalidUrlError(f"expected str, got {type(url).__name__}")

    # Browsers strip surrounding whitespace and any embedded tab/newline.
    cleaned = _TAB_NEWLINE_RE.sub("", url.strip())
    if not cleaned:
        raise InvalidUrlError("empty URL", url=url)

    prefix = _SCHEME_PREFIX_RE.match(cleaned)
    if prefix and prefix.group(1).lower() in _SPECIAL_SCHEMES:
        cleaned = cleaned.replace("\\", "/")

    try:
        parts = urlsplit(cleaned)
        hostname = parts.hostname
        parts.port  # noqa: B018  (raises ValueError on a malformed port)
    except ValueError as e:
        raise InvalidUrlError(f"unparseable URL: {e}", url=url) from e

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        raise InvalidUrlError("missing scheme", url=url)
    if not hostname or _FORBIDDEN_HOST_CHARS.search(hostname):
        raise InvalidUrlError("missing or invalid host", url=url)

    return ParsedUrl(hostname=hostname, domain=normalize_domain(hostname), pathname=parts.path or "/")
