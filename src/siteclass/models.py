# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Value types shared by the registry, scorer and classifier.

Everything here is immutable: results are built fresh per call and handed
straight back to the caller, registries are tuples of frozen records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class PlatformCategory(StrEnum):
    """Kind of hosted platform a registry entry describes."""

    SOCIAL_MEDIA = "social_media"
    DEVELOPMENT = "development"
    FEDERATED = "federated"
    CONTENT = "content"
    CREATIVE = "creative"
    STREAMING = "streaming"
    MARKETPLACE = "marketplace"
    COMMUNITY = "community"
    LINK_SERVICE = "link_service"
    KNOWLEDGE_BASE = "knowledge_base"


class PlatformType(StrEnum):
    """Who runs the site behind a URL."""

    INDEPENDENT = "independent"
    INDIE_PLATFORM = "indie_platform"
    CORPORATE_PROFILE = "corporate_profile"
    CORPORATE_GENERIC = "corporate_generic"
    UNKNOWN = "unknown"


class IndexingPurpose(StrEnum):
    """Downstream treatment assigned to a URL."""

    FULL_INDEX = "full_index"
    LINK_EXTRACTION = "link_extraction"
    PENDING_REVIEW = "pending_review"
    REJECTED = "rejected"


# ---------------------------------------------------------------------------
# Registry records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PlatformPattern:
    """A known platform and the paths that identify an individual's profile."""

    domain: str  # lowercase, no leading "www."
    profile_patterns: tuple[str, ...]
    category: PlatformCategory
    exclude_patterns: tuple[str, ...] = ()  # evaluated before profile_patterns
    link_locations: tuple[str, ...] = ()  # where outbound links usually live on a profile


@dataclass(frozen=True, slots=True)
class IndieEntry:
    """Indie-web-friendly host with its score bonus and reason tag."""

    domain: str
    score_modifier: float = 1.05
    reason: str = "indie_platform"


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Indexing decision for a single URL."""

    platform_type: PlatformType
    indexing_purpose: IndexingPurpose
    confidence: float  # 0.0–1.0
    reasons: tuple[str, ...]  # machine-readable evidence tags, for audit logs
    score_modifier: float  # multiplier applied to the content-quality score
    platform_name: str | None = None
    should_extract_links: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform_type": str(self.platform_type),
            "indexing_purpose": str(self.indexing_purpose),
            "confidence": self.confidence,
            "reasons": list(self.reasons),
            "score_modifier": self.score_modifier,
            "platform_name": self.platform_name,
            "should_extract_links": self.should_extract_links,
        }


@dataclass(frozen=True, slots=True)
class ProfileMatch:
    """Outcome of ``is_profile_url``; ``platform`` is set only on a match."""

    is_profile: bool
    platform: PlatformPattern | None = None


@dataclass(frozen=True, slots=True)
class IndexingRecommendation:
    """Human-oriented summary of a ClassificationResult."""

    should_index: bool
    should_extract_links: bool
    reason: str


@dataclass(frozen=True, slots=True)
class IndependenceScore:
    """Independence heuristic score with the names of the signals that fired."""

    score: float
    signals: tuple[str, ...] = field(default_factory=tuple)
