# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Classifier configuration: every static table bundled into one immutable value.

``DEFAULT_CONFIG`` is built once at import from the module tables and shared
by every caller. A deployment that needs different tables loads a whole new
value with ``load_config()`` and passes it explicitly; nothing mutates the
default.

YAML layout (each section optional, replaces the default section wholesale)::

    url_shorteners: [bit.ly, t.co]
    large_federated_instances: [mastodon.social]
    tilde_domains: [tilde.town]
    indie_platforms:
      - {domain: neocities.org, score_modifier: 1.15, reason: neocities_community}
    platforms:
      - domain: github.com
        profile_patterns: ["/*"]
        exclude_patterns: ["/features", "/*/*"]
        category: development
"""

from __future__ import annotations

import dataclasses
import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .indie import INDIE_PLATFORMS, LARGE_FEDERATED_INSTANCES, TILDE_DOMAINS, URL_SHORTENERS
from .models import IndieEntry, PlatformCategory, PlatformPattern
from .platforms import CORPORATE_PLATFORMS, FEDERATED_INSTANCE_PATTERNS
from .urls import normalize_domain

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SITECLASS_CONFIG"


@dataclasses.dataclass(frozen=True, slots=True, kw_only=True)
class ClassifierConfig:
    """Immutable set of tables the registry, scorer and classifier read."""

    platforms: tuple[PlatformPattern, ...] = CORPORATE_PLATFORMS
    indie_platforms: tuple[IndieEntry, ...] = INDIE_PLATFORMS
    tilde_domains: tuple[str, ...] = TILDE_DOMAINS
    url_shorteners: frozenset[str] = URL_SHORTENERS
    large_federated_instances: frozenset[str] = LARGE_FEDERATED_INSTANCES
    federated_instance_patterns: tuple[re.Pattern[str], ...] = FEDERATED_INSTANCE_PATTERNS


DEFAULT_CONFIG = ClassifierConfig()


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------


def _domain_list(raw: Any, section: str) -> tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(d, str) and d.strip() for d in raw):
        raise ConfigError(f"'{section}' must be a list of domain names")
    return tuple(normalize_domain(d) for d in raw)


def _str_tuple(raw: Any, field: str, domain: str) -> tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list) or not all(isinstance(p, str) for p in raw):
        raise ConfigError(f"platform {domain!r}: '{field}' must be a list of strings")
    return tuple(raw)


def _platform(raw: Any) -> PlatformPattern:
    if not isinstance(raw, Mapping) or not isinstance(raw.get("domain"), str):
        raise ConfigError("each platform needs at least a 'domain'")
    domain = normalize_domain(raw["domain"])
    try:
        category = PlatformCategory(raw.get("category", ""))
    except ValueError:
        raise ConfigError(f"platform {domain!r}: unknown category {raw.get('category')!r}") from None
    profile_patterns = _str_tuple(raw.get("profile_patterns"), "profile_patterns", domain)
    if not profile_patterns:
        raise ConfigError(f"platform {domain!r}: 'profile_patterns' must not be empty")
    return PlatformPattern(
        domain=domain,
        profile_patterns=profile_patterns,
        category=category,
        exclude_patterns=_str_tuple(raw.get("exclude_patterns"), "exclude_patterns", domain),
        link_locations=_str_tuple(raw.get("link_locations"), "link_locations", domain),
    )


def _indie_entry(raw: Any) -> IndieEntry:
    if isinstance(raw, str):
        return IndieEntry(normalize_domain(raw))
    if not isinstance(raw, Mapping) or not isinstance(raw.get("domain"), str):
        raise ConfigError("each indie platform needs a 'domain'")
    try:
        modifier = float(raw.get("score_modifier", 1.05))
    except (TypeError, ValueError):
        raise ConfigError(f"indie platform {raw['domain']!r}: score_modifier must be a number") from None
    return IndieEntry(normalize_domain(raw["domain"]), modifier, str(raw.get("reason", "indie_platform")))


def _list_section(data: Mapping[str, Any], section: str) -> list:
    raw = data[section]
    if not isinstance(raw, list):
        raise ConfigError(f"'{section}' must be a list")
    return raw


_SECTIONS = frozenset(
    {"platforms", "indie_platforms", "tilde_domains", "url_shorteners", "large_federated_instances"}
)


def config_from_mapping(data: Mapping[str, Any], *, base: ClassifierConfig = DEFAULT_CONFIG) -> ClassifierConfig:
    """Build a config from parsed YAML/JSON; missing sections keep *base*."""
    unknown = set(data) - _SECTIONS
    if unknown:
        raise ConfigError(f"unknown config section(s): {', '.join(sorted(unknown))}")

    overrides: dict[str, Any] = {}
    if "platforms" in data:
        overrides["platforms"] = tuple(_platform(p) for p in _list_section(data, "platforms"))
    if "indie_platforms" in data:
        overrides["indie_platforms"] = tuple(_indie_entry(e) for e in _list_section(data, "indie_platforms"))
    if "tilde_domains" in data:
        overrides["tilde_domains"] = _domain_list(data["tilde_domains"], "tilde_domains")
    if "url_shorteners" in data:
        overrides["url_shorteners"] = frozenset(_domain_list(data["url_shorteners"], "url_shorteners"))
    if "large_federated_instances" in data:
        overrides["large_federated_instances"] = frozenset(
            _domain_list(data["large_federated_instances"], "large_federated_instances")
        )
    return dataclasses.replace(base, **overrides)


def load_config(path: str | Path) -> ClassifierConfig:
    """Load a YAML config file on top of the built-in tables."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config: {e}", path=str(path)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", path=str(path)) from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError("config root must be a mapping", path=str(path))

    try:
        config = config_from_mapping(data)
    except ConfigError as e:
        raise ConfigError(str(e), path=str(path)) from e
    logger.info(
        "Loaded classifier config from %s (%d platforms, %d indie hosts)",
        path,
        len(config.platforms),
        len(config.indie_platforms),
    )
    return config


def config_from_env() -> ClassifierConfig:
    """``load_config($SITECLASS_CONFIG)`` when set, else ``DEFAULT_CONFIG``."""
    path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    return load_config(path) if path else DEFAULT_CONFIG
