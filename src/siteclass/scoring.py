# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Independence heuristic for domains no rule recognised.

Additive points on a 0.5 base, clamped to 1.0. The bonuses overlap freely;
the number is a crude ranking signal, not a probability. The classifier
treats anything above ``INDEPENDENT_THRESHOLD`` as an independent site.
"""

from __future__ import annotations

import re

from .models import IndependenceScore

BASE_SCORE = 0.5
MAX_SCORE = 1.0
INDEPENDENT_THRESHOLD = 0.7

INDIE_FRIENDLY_TLDS: tuple[str, ...] = (
    ".com", ".net", ".org", ".io", ".dev", ".me", ".co", ".cc",
    ".xyz", ".app", ".blog", ".site", ".page", ".tech", ".codes", ".wtf",
    ".cool", ".fun", ".art", ".design", ".space", ".zone", ".lol", ".online",
)  # fmt: skip

# Personal TLDs get a tighter label-length window.
PERSONAL_TLDS: tuple[str, ...] = (".me", ".dev", ".blog", ".site", ".page", ".co", ".cc", ".io")
VANITY_TLDS: tuple[str, ...] = (".me", ".dev", ".blog", ".site", ".page")

PERSONAL_NAME_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        r"^[a-z]+-[a-z]+\.",  # firstname-lastname
        r"^[a-z]{3,15}\.[a-z]+$",  # short single label
        r"^(my|the)[a-z]+\.",
        r"^[a-z0-9]+(blog|site|web|page|portfolio|works)\.",
        r"^(hello|hey|hi)[a-z0-9-]*\.",
    )
)

GENERIC_SUBDOMAINS: frozenset[str] = frozenset(
    {"www", "blog", "shop", "store", "app", "api", "cdn", "images", "static", "assets", "media"}
)

PERSONAL_PATH_INDICATORS: tuple[str, ...] = (
    "/about", "/blog", "/projects", "/portfolio", "/contact", "/work", "/writing", "/posts",
    "/notes", "/now", "/uses", "/garden", "/wiki", "/links", "/bookmarks", "/resume",
)  # fmt: skip


def _first_label_length_ok(domain: str, labels: list[str]) -> bool:
    upper = 15 if domain.endswith(PERSONAL_TLDS) else 20
    return 3 <= len(labels[0]) <= upper


def explain_independence(domain: str, pathname: str) -> IndependenceScore:
    """Score *domain*/*pathname* and report which signals contributed."""
    domain = domain.lower()
    labels = domain.split(".")
    two_labels = len(labels) == 2
    score = BASE_SCORE
    signals: list[str] = []

    if domain.endswith(INDIE_FRIENDLY_TLDS):
        score += 0.2
        signals.append("indie_friendly_tld")

    if two_labels and _first_label_length_ok(domain, labels):
        score += 0.15
        signals.append("short_domain")

    if any(rx.search(domain) for rx in PERSONAL_NAME_PATTERNS):
        score += 0.15
        signals.append("personal_naming")

    if two_labels and "-" not in labels[0] and domain.endswith(VANITY_TLDS):
        score += 0.1
        signals.append("vanity_tld")

    if labels[0] not in GENERIC_SUBDOMAINS:
        score += 0.05
        signals.append("non_generic_subdomain")

    if any(ind in pathname for ind in PERSONAL_PATH_INDICATORS):
        score += 0.1
        signals.append("personal_path")

    return IndependenceScore(score=min(MAX_SCORE, round(score, 4)), signals=tuple(signals))


def score_independence(domain: str, pathname: str) -> float:
    """Likelihood-ish score in [0.5, 1.0] that *domain* is an independent personal site."""
    return explain_independence(domain, pathname).score
