# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for re-classification of stored site records."""

from __future__ import annotations

import logging

import pytest

from siteclass.audit import AuditReport, SiteRecord, audit_sites, needs_audit
from siteclass.errors import SiteClassError


def _record(id: str, url: str, **kw) -> SiteRecord:
    return SiteRecord(id=id, url=url, title=f"site {id}", **kw)


class TestSiteRecord:
    def test_from_mapping_snake_case(self):
        rec = SiteRecord.from_mapping(
            {"id": 7, "url": "https://a.example/", "community_score": 12, "indexing_purpose": "full_index"}
        )
        assert rec.id == "7"
        assert rec.community_score == 12
        assert rec.indexing_purpose == "full_index"
        assert rec.title == ""

    def test_from_mapping_camel_case(self):
        rec = SiteRecord.from_mapping(
            {
                "id": "x",
                "url": "https://a.example/",
                "title": None,
                "seedingScore": 40,
                "communityScore": 3,
                "platformType": "independent",
            }
        )
        assert rec.seeding_score == 40
        assert rec.platform_type == "independent"
        assert rec.current_score == 40

    def test_numeric_strings_are_converted(self):
        rec = SiteRecord.from_mapping(
            {"id": 1, "url": "https://a.example/", "communityScore": "12", "seeding_score": "7.5"}
        )
        assert rec.community_score == 12.0
        assert rec.seeding_score == 7.5
        assert rec.current_score == 7.5

    def test_non_numeric_score_names_the_record(self):
        with pytest.raises(SiteClassError, match=r"record '42': community_score must be a number"):
            SiteRecord.from_mapping({"id": 42, "url": "https://a.example/", "communityScore": "high"})

    def test_current_score_falls_back(self):
        assert _record("a", "https://a.example/", community_score=5).current_score == 5
        assert _record("a", "https://a.example/").current_score == 0


class TestNeedsAudit:
    def test_full_index_and_legacy_records(self):
        assert needs_audit(_record("1", "u", indexing_purpose="full_index", platform_type="independent"))
        assert needs_audit(_record("2", "u", platform_type="independent"))
        assert needs_audit(_record("3", "u", indexing_purpose="link_extraction"))

    def test_already_classified_records_skipped(self):
        assert not needs_audit(_record("4", "u", indexing_purpose="link_extraction", platform_type="corporate_profile"))
        assert not needs_audit(_record("5", "u", indexing_purpose="rejected", platform_type="corporate_generic"))


class TestAuditSites:
    def test_corporate_profile_found(self):
        report = audit_sites(
            [
                _record("gh", "https://github.com/torvalds", community_score=30, indexing_purpose="full_index"),
                _record("yt", "https://www.youtube.com/@somechannel"),
            ]
        )
        assert isinstance(report, AuditReport)
        assert [c.id for c in report.corporate_profiles] == ["gh", "yt"]
        gh = report.corporate_profiles[0]
        assert gh.platform_name == "github.com"
        assert gh.current_score == 30
        assert report.summary.corporate_found == 2
        assert report.summary.false_positives == 1

    def test_string_scores_from_export(self):
        row = {
            "id": 1,
            "url": "https://github.com/torvalds",
            "communityScore": "12",
            "indexingPurpose": "full_index",
        }
        report = audit_sites([SiteRecord.from_mapping(row)])
        assert report.corporate_profiles[0].current_score == 12.0
        assert report.summary.false_positives == 1

    def test_indie_upgrade_with_bonus(self):
        report = audit_sites(
            [_record("t", "https://tilde.town/~alice/", seeding_score=100, platform_type="independent")]
        )
        (upgrade,) = report.indie_upgrades
        assert upgrade.previous_platform_type == "independent"
        assert upgrade.score_modifier == 1.10
        assert upgrade.score_bonus == 10

    def test_already_indie_not_upgraded(self):
        report = audit_sites(
            [
                _record(
                    "n",
                    "https://alice.neocities.org/",
                    indexing_purpose="full_index",
                    platform_type="indie_platform",
                )
            ]
        )
        assert report.indie_upgrades == []
        assert report.summary.total_sites == 1

    def test_skipped_records_not_counted(self):
        report = audit_sites(
            [
                _record(
                    "a",
                    "https://github.com/torvalds",
                    indexing_purpose="link_extraction",
                    platform_type="corporate_profile",
                ),
                _record("b", "https://jdoe.me/blog", indexing_purpose="full_index", platform_type="independent"),
            ]
        )
        s = report.summary
        assert s.total_sites == 1
        assert s.corporate_found == 0
        assert s.indie_upgrades == 0
        assert s.sites_to_update == 0

    def test_sites_to_update_sums_both_lists(self):
        report = audit_sites(
            [
                _record("gh", "https://github.com/torvalds"),
                _record("t", "https://tilde.club/~bob/", community_score=20),
                _record("bad", "not a url"),
            ]
        )
        assert report.summary.total_sites == 3
        assert report.summary.sites_to_update == 2
        assert report.indie_upgrades[0].score_bonus == 2

    def test_accepts_generator(self):
        rows = ({"id": str(i), "url": "https://github.com/user%d" % i} for i in range(3))
        report = audit_sites(SiteRecord.from_mapping(r) for r in rows)
        assert report.summary.corporate_found == 3

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="siteclass.audit"):
            audit_sites([_record("gh", "https://github.com/torvalds")])
        assert "Audited 1 sites" in caplog.text
