# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for ClassifierConfig loading and its effect on classification."""

from __future__ import annotations

import dataclasses

import pytest

from siteclass.classifier import classify
from siteclass.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    ClassifierConfig,
    config_from_env,
    config_from_mapping,
    load_config,
)
from siteclass.errors import ConfigError, SiteClassError
from siteclass.models import IndexingPurpose, PlatformCategory, PlatformType


class TestDefaultConfig:
    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.url_shorteners = frozenset()  # type: ignore[misc]

    def test_every_category_is_represented(self):
        categories = {p.category for p in DEFAULT_CONFIG.platforms}
        assert categories == set(PlatformCategory)

    def test_empty_mapping_keeps_defaults(self):
        assert config_from_mapping({}) == DEFAULT_CONFIG


class TestConfigFromMapping:
    def test_sections_replace_wholesale(self):
        cfg = config_from_mapping({"url_shorteners": ["Sho.rt", "www.tiny.link"]})
        assert cfg.url_shorteners == frozenset({"sho.rt", "tiny.link"})
        assert cfg.platforms == DEFAULT_CONFIG.platforms
        assert "url_shortener" not in classify("https://bit.ly/x", config=cfg).reasons
        assert classify("https://sho.rt/x", config=cfg).reasons == ("url_shortener",)

    def test_custom_platform(self):
        cfg = config_from_mapping(
            {
                "platforms": [
                    {
                        "domain": "www.Forge.example",
                        "profile_patterns": ["/u/*"],
                        "exclude_patterns": ["/u/settings"],
                        "category": "development",
                    }
                ]
            }
        )
        (platform,) = cfg.platforms
        assert platform.domain == "forge.example"
        assert platform.category is PlatformCategory.DEVELOPMENT
        assert platform.link_locations == ()

        r = classify("https://forge.example/u/alice", config=cfg)
        assert r.platform_type == PlatformType.CORPORATE_PROFILE
        assert r.platform_name == "forge.example"
        assert classify("https://forge.example/u/settings", config=cfg).indexing_purpose == IndexingPurpose.REJECTED

    def test_github_no_longer_registered_with_custom_platforms(self):
        cfg = config_from_mapping(
            {"platforms": [{"domain": "forge.example", "profile_patterns": ["/*"], "category": "development"}]}
        )
        r = classify("https://github.com/torvalds", config=cfg)
        assert r.platform_type != PlatformType.CORPORATE_PROFILE

    def test_indie_entries_accept_strings_and_mappings(self):
        cfg = config_from_mapping(
            {"indie_platforms": ["pages.example", {"domain": "club.example", "score_modifier": 1.2, "reason": "club"}]}
        )
        plain, club = cfg.indie_platforms
        assert (plain.domain, plain.score_modifier, plain.reason) == ("pages.example", 1.05, "indie_platform")
        assert (club.domain, club.score_modifier, club.reason) == ("club.example", 1.2, "club")

        r = classify("https://me.club.example/", config=cfg)
        assert r.platform_type == PlatformType.INDIE_PLATFORM
        assert r.score_modifier == 1.2
        assert "club" in r.reasons

    def test_tilde_domains_override(self):
        cfg = config_from_mapping({"tilde_domains": ["shell.example"]})
        assert cfg.tilde_domains == ("shell.example",)
        r = classify("https://shell.example/~bob/", config=cfg)
        assert r.platform_type == PlatformType.INDIE_PLATFORM

    def test_large_federated_override(self):
        cfg = config_from_mapping({"large_federated_instances": ["tiny.social"]})
        assert "large_federated_instance" in classify("https://tiny.social/", config=cfg).reasons
        assert classify("https://mastodon.social/", config=cfg).platform_type == PlatformType.CORPORATE_GENERIC

    @pytest.mark.parametrize(
        "data,message",
        [
            ({"bogus": []}, "unknown config section"),
            ({"platforms": {}}, "must be a list"),
            ({"platforms": [{"profile_patterns": ["/*"]}]}, "domain"),
            ({"platforms": [{"domain": "x.example", "profile_patterns": ["/*"], "category": "nope"}]}, "category"),
            ({"platforms": [{"domain": "x.example", "category": "social_media"}]}, "profile_patterns"),
            ({"platforms": [{"domain": "x.example", "profile_patterns": "/*", "category": "social_media"}]}, "list"),
            ({"indie_platforms": [{"reason": "x"}]}, "domain"),
            ({"indie_platforms": [{"domain": "x.example", "score_modifier": "big"}]}, "number"),
            ({"url_shorteners": "bit.ly"}, "list of domain names"),
            ({"tilde_domains": [""]}, "list of domain names"),
        ],
    )
    def test_invalid(self, data, message):
        with pytest.raises(ConfigError, match=message):
            config_from_mapping(data)


class TestLoadConfig:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / "siteclass.yaml"
        path.write_text(
            "url_shorteners: [sho.rt]\n"
            "platforms:\n"
            "  - domain: forge.example\n"
            "    profile_patterns: ['/*']\n"
            "    exclude_patterns: ['/explore']\n"
            "    category: development\n",
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert isinstance(cfg, ClassifierConfig)
        assert cfg.url_shorteners == frozenset({"sho.rt"})
        assert [p.domain for p in cfg.platforms] == ["forge.example"]
        assert cfg.indie_platforms == DEFAULT_CONFIG.indie_platforms

    def test_empty_file_is_default(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read config") as exc_info:
            load_config(tmp_path / "missing.yaml")
        assert exc_info.value.path.endswith("missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("platforms: [\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(path)

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- bit.ly\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_section_error_carries_path(self, tmp_path):
        path = tmp_path / "unknown.yaml"
        path.write_text("shorteners: [bit.ly]\n", encoding="utf-8")
        with pytest.raises(SiteClassError) as exc_info:
            load_config(path)
        assert exc_info.value.path == str(path)


class TestConfigFromEnv:
    def test_unset_returns_default(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert config_from_env() is DEFAULT_CONFIG

    def test_set_loads_file(self, monkeypatch, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text("tilde_domains: [shell.example]\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert config_from_env().tilde_domains == ("shell.example",)
