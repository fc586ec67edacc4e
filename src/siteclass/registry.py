# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Platform registry lookups: is a domain corporate, is a URL a profile.

Lookup order in ``get_platform_for_domain``:
  1. exact registered domain
  2. registered parent domain (``en.wikipedia.org`` → ``wikipedia.org``)
  3. hosted-subdomain wildcard (``alice.tumblr.com`` via ``/*.tumblr.com``)
  4. fediverse-looking host → synthesized generic descriptor (never registered)

``is_domain_corporate`` keeps the coarse union of exact, wildcard and
federated checks for external callers. The classifier consults the three
parts separately, at different points of its rule table.
"""

from __future__ import annotations

from functools import lru_cache

from .config import DEFAULT_CONFIG, ClassifierConfig
from .errors import InvalidUrlError
from .models import PlatformCategory, PlatformPattern, ProfileMatch
from .pattern_matcher import matches
from .platforms import FEDERATED_PROFILE_PATTERNS
from .urls import normalize_domain, parse_url

_HOST_WILDCARD = "*."


@lru_cache(maxsize=16)
def _wildcard_bases(platforms: tuple[PlatformPattern, ...]) -> tuple[tuple[str, PlatformPattern], ...]:
    """(base domain, platform) for every ``*.base`` profile pattern."""
    bases = []
    for platform in platforms:
        for pattern in platform.profile_patterns:
            if _HOST_WILDCARD in pattern:
                bases.append((pattern.split(_HOST_WILDCARD, 1)[1], platform))
    return tuple(bases)


def _under(domain: str, base: str) -> bool:
    return domain == base or domain.endswith("." + base)


# ---------------------------------------------------------------------------
# Component predicates
# ---------------------------------------------------------------------------


def find_registered_platform(domain: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> PlatformPattern | None:
    """Exact registry hit on the normalised domain (first entry wins)."""
    domain = normalize_domain(domain)
    return next((p for p in config.platforms if p.domain == domain), None)


def find_hosted_subdomain_platform(
    domain: str, *, config: ClassifierConfig = DEFAULT_CONFIG
) -> PlatformPattern | None:
    """Platform whose ``*.base`` wildcard covers *domain*."""
    domain = normalize_domain(domain)
    return next((p for base, p in _wildcard_bases(config.platforms) if _under(domain, base)), None)


def looks_federated(domain: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    """Host name resembles a fediverse instance (``mastodon.*``, ``*.social``, ...)."""
    domain = normalize_domain(domain)
    return any(rx.search(domain) for rx in config.federated_instance_patterns)


# ---------------------------------------------------------------------------
# Public lookups
# ---------------------------------------------------------------------------


def is_domain_corporate(domain: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    """Check if a domain belongs to a corporate platform or a fediverse-looking host.

    Hosted-subdomain wildcards match on a label boundary: ``alice.tumblr.com``
    is under ``tumblr.com`` but ``notumblr.com`` is not, unlike a bare
    suffix test.
    """
    return (
        find_registered_platform(domain, config=config) is not None
        or find_hosted_subdomain_platform(domain, config=config) is not None
        or looks_federated(domain, config=config)
    )


def get_platform_for_domain(domain: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> PlatformPattern | None:
    """Get the platform descriptor for a domain, or None."""
    domain = normalize_domain(domain)

    direct = find_registered_platform(domain, config=config)
    if direct is not None:
        return direct

    for platform in config.platforms:
        if domain.endswith("." + platform.domain):
            return platform

    hosted = find_hosted_subdomain_platform(domain, config=config)
    if hosted is not None:
        return hosted

    if looks_federated(domain, config=config):
        return PlatformPattern(domain, FEDERATED_PROFILE_PATTERNS, PlatformCategory.FEDERATED)

    return None


def is_profile_url(url: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> ProfileMatch:
    """Check if *url* is an individual's profile page on a known platform.

    Never raises: an unparseable URL is simply not a profile.
    """
    try:
        parsed = parse_url(url)
    except InvalidUrlError:
        return ProfileMatch(is_profile=False)

    return match_profile(parsed.domain, parsed.pathname, config=config)


def match_profile(domain: str, pathname: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> ProfileMatch:
    """Profile check on an already-parsed host and path."""
    platform = get_platform_for_domain(domain, config=config)
    if platform is None:
        return ProfileMatch(is_profile=False)

    if matches(pathname, platform.profile_patterns, platform.exclude_patterns):
        return ProfileMatch(is_profile=True, platform=platform)
    return ProfileMatch(is_profile=False)
