# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""siteclass: indexing-decision engine for a community web index.

Given a URL found while crawling, decide whether it should be:
- fully indexed (independent sites, indie hosting platforms),
- used only to harvest outbound links (corporate profile pages),
- rejected (shorteners, knowledge bases, corporate non-profile pages),
- or queued for manual review.

Pure functions over a URL string and an immutable ``ClassifierConfig``;
nothing here fetches, parses HTML or persists state.
"""

from __future__ import annotations

from .classifier import apply_score_modifier, classify, get_indexing_recommendation, should_extract_links
from .config import DEFAULT_CONFIG, ClassifierConfig, load_config
from .errors import ConfigError, InvalidUrlError, SiteClassError
from .models import (
    ClassificationResult,
    IndexingPurpose,
    IndexingRecommendation,
    PlatformCategory,
    PlatformPattern,
    PlatformType,
    ProfileMatch,
)
from .registry import get_platform_for_domain, is_domain_corporate, is_profile_url
from .scoring import score_independence

__all__ = [
    "DEFAULT_CONFIG",
    "ClassificationResult",
    "ClassifierConfig",
    "ConfigError",
    "IndexingPurpose",
    "IndexingRecommendation",
    "InvalidUrlError",
    "PlatformCategory",
    "PlatformPattern",
    "PlatformType",
    "ProfileMatch",
    "SiteClassError",
    "apply_score_modifier",
    "classify",
    "get_indexing_recommendation",
    "get_platform_for_domain",
    "is_domain_corporate",
    "is_profile_url",
    "load_config",
    "score_independence",
    "should_extract_links",
]
