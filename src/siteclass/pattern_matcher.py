# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Glob-style path matching with exclude-before-include precedence.

Pattern syntax is deliberately tiny:

- ``*`` matches any run of characters (including ``/``).
- A pattern containing ``*`` must match the whole path.
- A pattern without ``*`` matches the path itself or any path below it
  (``/features`` matches ``/features`` and ``/features/copilot``).

Limitation: apart from ``*``, pattern text is pasted into the regular
expression unescaped, so ``.`` in ``/*.tumblr.com`` means "any character".
Registered patterns only contain path segments and ``*``; a pattern that
introduces ``?``, ``+``, ``(``, ``|`` or ``[`` will be read as regex syntax.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class GlobPattern:
    """A compiled path pattern."""

    source: str
    regex: re.Pattern[str] | None  # None for literal (prefix) patterns

    def matches(self, pathname: str) -> bool:
        if self.regex is not None:
            return self.regex.search(pathname) is not None
        return pathname == self.source or pathname.startswith(self.source + "/")


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> GlobPattern:
    """Compile *pattern* once; registry patterns are reused on every call."""
    if WILDCARD not in pattern:
        return GlobPattern(pattern, None)
    return GlobPattern(pattern, re.compile("^" + pattern.replace(WILDCARD, ".*") + r"\Z"))


def _any_match(pathname: str, patterns: Iterable[str]) -> bool:
    return any(compile_pattern(p).matches(pathname) for p in patterns)


def matches(pathname: str, include_patterns: Iterable[str], exclude_patterns: Iterable[str] = ()) -> bool:
    """True if *pathname* hits an include pattern and no exclude pattern.

    Exclusions are checked first and always win.
    """
    if _any_match(pathname, exclude_patterns):
        return False
    return _any_match(pathname, include_patterns)
