# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Ordered-rule domain classifier — decides how a discovered URL is indexed.

Every candidate URL is run down one table of rules; the first rule that
returns a result wins and nothing after it is consulted. Order is the whole
game here: a pubnix ``/~user`` page on ``tilde.club`` must hit the indie
rule before the fediverse heuristic sees ``.club``, and a
``<user>.wordpress.com`` blog must hit the hosted-blog rule before the
wildcard corporate rule sees ``wordpress.com``.

Rules, in order:
   1. url_shortener             → corporate_generic / rejected
   2. corporate_profile         → corporate_profile / link_extraction
                                  (knowledge bases: corporate_generic / rejected)
   3. indie_platform            → indie_platform / full_index (allowlist or /~user)
   4. corporate_domain          → corporate_generic / rejected (registered domain)
   5. github_pages              → indie_platform / full_index
   6. hosted_blog               → corporate_profile / link_extraction
   7. corporate_hosted_subdomain → corporate_generic / rejected
   8. indie_federated_instance  → indie_platform / full_index
   9. federated_heuristic       → corporate_generic / rejected
  10. independence_score        → independent / full_index or unknown / pending_review

An unparseable URL short-circuits to unknown / rejected. ``classify`` never
raises.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, ClassifierConfig
from .errors import InvalidUrlError
from .indie import BLOG_BRANDS, INDIE_FEDERATED_SUFFIXES, TILDE_REASON, TILDE_SCORE_MODIFIER
from .models import (
    ClassificationResult,
    IndexingPurpose,
    IndexingRecommendation,
    IndieEntry,
    PlatformCategory,
    PlatformType,
)
from .registry import (
    find_hosted_subdomain_platform,
    find_registered_platform,
    looks_federated,
    match_profile,
)
from .scoring import INDEPENDENT_THRESHOLD, explain_independence
from .urls import ParsedUrl, parse_url

logger = logging.getLogger(__name__)

_HOSTED_BLOG_RE = re.compile(
    r"^[^.]+\.(wordpress|blogspot|tumblr|medium|substack|ghost|wixsite|squarespace|weebly)\.(com|io)$"
)

# ---------------------------------------------------------------------------
# Result builders
# ---------------------------------------------------------------------------


def _rejected(
    platform_type: PlatformType,
    confidence: float,
    *reasons: str,
    platform_name: str | None = None,
) -> ClassificationResult:
    return ClassificationResult(
        platform_type=platform_type,
        indexing_purpose=IndexingPurpose.REJECTED,
        confidence=confidence,
        reasons=reasons,
        score_modifier=0.0,
        platform_name=platform_name,
    )


def _link_extraction(confidence: float, platform_name: str, *reasons: str) -> ClassificationResult:
    return ClassificationResult(
        platform_type=PlatformType.CORPORATE_PROFILE,
        indexing_purpose=IndexingPurpose.LINK_EXTRACTION,
        confidence=confidence,
        reasons=reasons,
        score_modifier=0.0,
        platform_name=platform_name,
        should_extract_links=True,
    )


def _indexed(
    platform_type: PlatformType,
    confidence: float,
    score_modifier: float,
    *reasons: str,
    platform_name: str | None = None,
) -> ClassificationResult:
    return ClassificationResult(
        platform_type=platform_type,
        indexing_purpose=IndexingPurpose.FULL_INDEX,
        confidence=confidence,
        reasons=reasons,
        score_modifier=score_modifier,
        platform_name=platform_name,
    )


INVALID_URL_RESULT = _rejected(PlatformType.UNKNOWN, 1.0, "invalid_url")


# ---------------------------------------------------------------------------
# Rule helpers
# ---------------------------------------------------------------------------


def _indie_entry(domain: str, config: ClassifierConfig) -> IndieEntry | None:
    """Allowlist entry equal to *domain* or a parent of it (first listed wins)."""
    for entry in config.indie_platforms:
        if domain == entry.domain or domain.endswith("." + entry.domain):
            return entry
    return None


def _is_tilde_page(target: ParsedUrl, config: ClassifierConfig) -> bool:
    return "/~" in target.pathname and any(td in target.hostname for td in config.tilde_domains)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _rule_url_shortener(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult | None:
    if target.domain in config.url_shorteners:
        return _rejected(PlatformType.CORPORATE_GENERIC, 1.0, "url_shortener")
    return None


def _rule_corporate_profile(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult | None:
    match = match_profile(target.domain, target.pathname, config=config)
    if not match.is_profile or match.platform is None:
        return None
    platform = match.platform
    if platform.category is PlatformCategory.KNOWLEDGE_BASE:
        return _rejected(
            PlatformType.CORPORATE_GENERIC,
            0.95,
            "knowledge_base_platform",
            f"platform:{platform.domain}",
            platform_name=platform.domain,
        )
    return _link_extraction(
        0.95,
        platform.domain,
        "corporate_platform_profile",
        f"platform:{platform.domain}",
        f"category:{platform.category}",
    )


def _rule_indie_platform(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult | None:
    entry = _indie_entry(target.domain, config)
    if entry is not None:
        return _indexed(
            PlatformType.INDIE_PLATFORM,
            0.95,
            entry.score_modifier,
            "indie_hosting_platform",
            entry.reason,
            platform_name=entry.domain,
        )
    if _is_tilde_page(target, config):
        return _indexed(PlatformType.INDIE_PLATFORM, 0.95, TILDE_SCORE_MODIFIER, "indie_hosting_platform", TILDE_REASON)
    return None


def _rule_corporate_domain(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult | None:
    platform = find_registered_platform(target.domain, config=config)
    if platform is None:
        return None
    return _rejected(
        PlatformType.CORPORATE_GENERIC,
        0.9,
        "corporate_platform_non_profile",
        f"platform:{platform.domain}",
        platform_name=platform.domain,
    )


def _rule_github_pages(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult | None:
    # Rule 3 normally catches these through the github.io allowlist entry;
    # this still applies when a custom allowlist drops it.
    if target.domain.endswith(".github.io"):
        return _indexed(PlatformType.INDIE_PLATFORM, 0.9, 0.95, "github_pages_site")
    return None


def _rule_hosted_blog(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult | None:
    m = _HOSTED_BLOG_RE.match(target.domain)
    if m is None:
        return None
    service = f"{m.group(1)}.{m.group(2)}"
    brand = BLOG_BRANDS.get(service, service)
    return _link_extraction(0.9, brand, "custom_subdomain_blog", f"platform:{brand}")


def _rule_corporate_hosted_subdomain(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult | None:
    platform = find_hosted_subdomain_platform(target.domain, config=config)
    if platform is None:
        return None
    return _rejected(
        PlatformType.CORPORATE_GENERIC,
        0.9,
        "corporate_platform_non_profile",
        "hosted_subdomain",
        f"platform:{platform.domain}",
        platform_name=platform.domain,
    )


def _rule_indie_federated_instance(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult | None:
    if target.domain.endswith(INDIE_FEDERATED_SUFFIXES) and target.domain not in config.large_federated_instances:
        return _indexed(PlatformType.INDIE_PLATFORM, 0.85, 1.1, "indie_federated_instance")
    return None


def _rule_federated_heuristic(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult | None:
    if not looks_federated(target.domain, config=config):
        return None
    reason = "large_federated_instance" if target.domain in config.large_federated_instances else "federated_instance"
    return _rejected(PlatformType.CORPORATE_GENERIC, 0.9, "corporate_platform_non_profile", reason)


def _rule_independence_score(target: ParsedUrl, config: ClassifierConfig) -> ClassificationResult:
    result = explain_independence(target.domain, target.pathname)
    if result.score > INDEPENDENT_THRESHOLD:
        return _indexed(PlatformType.INDEPENDENT, result.score, 1.2, "independent_domain", *result.signals)
    return ClassificationResult(
        platform_type=PlatformType.UNKNOWN,
        indexing_purpose=IndexingPurpose.PENDING_REVIEW,
        confidence=0.5,
        reasons=("classification_uncertain", f"independence_score:{result.score:.2f}"),
        score_modifier=1.0,
    )


@dataclass(frozen=True, slots=True)
class Rule:
    """One step of the decision list; ``decide`` returns None to pass."""

    name: str
    decide: Callable[[ParsedUrl, ClassifierConfig], ClassificationResult | None]


RULES: tuple[Rule, ...] = (
    Rule("url_shortener", _rule_url_shortener),
    Rule("corporate_profile", _rule_corporate_profile),
    Rule("indie_platform", _rule_indie_platform),
    Rule("corporate_domain", _rule_corporate_domain),
    Rule("github_pages", _rule_github_pages),
    Rule("hosted_blog", _rule_hosted_blog),
    Rule("corporate_hosted_subdomain", _rule_corporate_hosted_subdomain),
    Rule("indie_federated_instance", _rule_indie_federated_instance),
    Rule("federated_heuristic", _rule_federated_heuristic),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def classify(url: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> ClassificationResult:
    """Decide how *url* should be treated by the index.

    Args:
        url: candidate URL as found by the crawler (any string)
        config: tables to classify against (default: built-in registry)

    Returns:
        ClassificationResult. Never raises; unparseable input is rejected.
    """
    try:
        target = parse_url(url)
    except InvalidUrlError as e:
        logger.debug("Rejecting unparseable URL %r: %s", url, e)
        return INVALID_URL_RESULT

    rule_name = "independence_score"
    for rule in RULES:
        result = rule.decide(target, config)
        if result is not None:
            rule_name = rule.name
            break
    else:
        result = _rule_independence_score(target, config)

    logger.debug(
        "Classified %s via %s: %s/%s",
        target.domain,
        rule_name,
        result.platform_type,
        result.indexing_purpose,
    )
    return result


def should_extract_links(url: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    """Determine if a URL should be crawled for outbound links only."""
    return classify(url, config=config).should_extract_links


def get_indexing_recommendation(url: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> IndexingRecommendation:
    result = classify(url, config=config)
    purpose = result.indexing_purpose
    if purpose is IndexingPurpose.FULL_INDEX:
        return IndexingRecommendation(True, False, f"Index as {result.platform_type}")
    if purpose is IndexingPurpose.LINK_EXTRACTION:
        return IndexingRecommendation(False, True, f"Extract links from {result.platform_name or 'corporate profile'}")
    if purpose is IndexingPurpose.PENDING_REVIEW:
        return IndexingRecommendation(False, False, "Requires manual review")
    return IndexingRecommendation(False, False, ", ".join(result.reasons))


def apply_score_modifier(score: float, result: ClassificationResult) -> int:
    """Scale a content-quality score by the classification's modifier (floored)."""
    return math.floor(score * result.score_modifier)
