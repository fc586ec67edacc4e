# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Re-classify stored site records to catch historical misclassifications.

Works on records exported from the index store (the store itself is not
touched here):

- corporate profiles that slipped into the full-text index are listed for
  demotion to link extraction;
- indie-platform pages stored under another platform type are listed for
  an upgrade together with the score bonus their modifier implies.

Usage:
    from siteclass.audit import SiteRecord, audit_sites
    report = audit_sites(SiteRecord.from_mapping(row) for row in rows)
    print(report.summary)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .classifier import classify
from .config import DEFAULT_CONFIG, ClassifierConfig
from .errors import SiteClassError
from .models import IndexingPurpose, PlatformType

logger = logging.getLogger(__name__)


# ── Types ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SiteRecord:
    """A stored site as exported from the index store."""

    id: str
    url: str
    title: str = ""
    community_score: float | None = None
    seeding_score: float | None = None
    indexing_purpose: str | None = None
    platform_type: str | None = None

    @property
    def current_score(self) -> float:
        return self.seeding_score or self.community_score or 0

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> SiteRecord:
        """Accept snake_case or camelCase column names.

        Score columns may arrive as numeric strings; anything that is not a
        number raises ``SiteClassError``.
        """

        def pick(snake: str, camel: str) -> Any:
            return row.get(snake, row.get(camel))

        record_id = str(row.get("id", ""))

        def score(snake: str, camel: str) -> float | None:
            value = pick(snake, camel)
            if value is None:
                return None
            try:
                return float(value)
            except (TypeError, ValueError):
                raise SiteClassError(f"record {record_id!r}: {snake} must be a number, got {value!r}") from None

        return cls(
            id=record_id,
            url=str(row.get("url", "")),
            title=str(row.get("title") or ""),
            community_score=score("community_score", "communityScore"),
            seeding_score=score("seeding_score", "seedingScore"),
            indexing_purpose=pick("indexing_purpose", "indexingPurpose"),
            platform_type=pick("platform_type", "platformType"),
        )


@dataclass(frozen=True)
class CorporateProfileFinding:
    """Indexed record that is really a corporate profile."""

    id: str
    url: str
    title: str
    current_score: float
    platform_name: str | None


@dataclass(frozen=True)
class IndieUpgrade:
    """Record that should be re-tagged as an indie platform page."""

    id: str
    url: str
    title: str
    current_score: float
    previous_platform_type: str | None
    score_modifier: float
    score_bonus: int


@dataclass(frozen=True)
class AuditSummary:
    total_sites: int
    corporate_found: int
    false_positives: int  # corporate profiles that had earned a score
    indie_upgrades: int
    sites_to_update: int


@dataclass
class AuditReport:
    summary: AuditSummary
    corporate_profiles: list[CorporateProfileFinding] = field(default_factory=list)
    indie_upgrades: list[IndieUpgrade] = field(default_factory=list)


# ── Audit ────────────────────────────────────────────────────────────────────


def needs_audit(record: SiteRecord) -> bool:
    """Only fully indexed records and legacy records without a classification."""
    return (
        record.indexing_purpose in (None, "", IndexingPurpose.FULL_INDEX)
        or not record.platform_type
    )


def audit_sites(records: Iterable[SiteRecord], *, config: ClassifierConfig = DEFAULT_CONFIG) -> AuditReport:
    corporate: list[CorporateProfileFinding] = []
    upgrades: list[IndieUpgrade] = []
    total = 0

    for record in records:
        if not needs_audit(record):
            continue
        total += 1
        result = classify(record.url, config=config)

        if result.platform_type is PlatformType.CORPORATE_PROFILE:
            corporate.append(
                CorporateProfileFinding(
                    id=record.id,
                    url=record.url,
                    title=record.title,
                    current_score=record.community_score or 0,
                    platform_name=result.platform_name,
                )
            )
        elif (
            result.platform_type is PlatformType.INDIE_PLATFORM
            and record.platform_type != PlatformType.INDIE_PLATFORM
        ):
            current = record.current_score
            upgrades.append(
                IndieUpgrade(
                    id=record.id,
                    url=record.url,
                    title=record.title,
                    current_score=current,
                    previous_platform_type=record.platform_type,
                    score_modifier=result.score_modifier,
                    score_bonus=math.floor(current * (result.score_modifier - 1.0)),
                )
            )

    summary = AuditSummary(
        total_sites=total,
        corporate_found=len(corporate),
        false_positives=sum(1 for c in corporate if c.current_score > 0),
        indie_upgrades=len(upgrades),
        sites_to_update=len(corporate) + len(upgrades),
    )
    logger.info(
        "Audited %d sites: %d corporate profiles (%d scored), %d indie upgrades",
        summary.total_sites,
        summary.corporate_found,
        summary.false_positives,
        summary.indie_upgrades,
    )
    return AuditReport(summary=summary, corporate_profiles=corporate, indie_upgrades=upgrades)
