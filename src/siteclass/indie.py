# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Indie-web tables: friendly hosts, pubnix servers, shorteners, big instances.

Hosts on the allowlist are indexed in full and get a small score bonus.
Each entry matches the host itself and every subdomain of it.
"""

from __future__ import annotations

from .models import IndieEntry as E

_NEOCITIES = "neocities_community"
_TILDE = "tilde_community"
_INDIE_BLOG = "indie_blog_platform"
_STATIC = "static_hosting"

INDIE_PLATFORMS: tuple[E, ...] = (
    # community-first hosts
    E("neocities.org", 1.15, _NEOCITIES),
    E("tilde.club", 1.10, _TILDE),
    E("tilde.town", 1.10, _TILDE),
    E("tilde.team", 1.10, _TILDE),
    E("tilde.pink", 1.10, _TILDE),
    E("tilde.zone", 1.10, _TILDE),
    E("tilde.institute", 1.10, _TILDE),
    E("tilde.guru", 1.10, _TILDE),
    E("tilde.fun", 1.10, _TILDE),
    E("tildeverse.org", 1.10, _TILDE),
    E("envs.net", 1.10, _TILDE),
    E("ctrl-c.club", 1.10, _TILDE),
    E("sdf.org", 1.10, _TILDE),
    E("rawtext.club", 1.10, _TILDE),
    E("cosmic.voyage"),
    # static site hosts
    E("github.io", 1.05, "github_pages"),
    E("gitlab.io"),
    E("codeberg.page"),
    E("netlify.app", 1.0, _STATIC),
    E("vercel.app", 1.0, _STATIC),
    E("surge.sh", 1.0, _STATIC),
    E("render.com"),
    E("fly.dev"),
    E("deno.dev"),
    E("pages.dev"),
    # personal site builders
    E("bearblog.dev", 1.10, _INDIE_BLOG),
    E("micro.blog", 1.10, _INDIE_BLOG),
    E("omg.lol", 1.10, _INDIE_BLOG),
    E("midnight.pub", 1.10, _INDIE_BLOG),
    E("smol.pub", 1.10, _INDIE_BLOG),
    E("write.as"),
    E("hey.world"),
    E("mataroa.blog"),
    E("prose.sh"),
    E("lists.sh"),
    # gemini / small web
    E("gemini.space"),
    E("flounder.online"),
    E("srht.site"),
    E("sourcehut.org"),
    # other communities
    E("exozyme.me"),
    E("dimension.sh"),
    E("circumlunar.space"),
)

# Shared servers whose users publish at /~username.
TILDE_DOMAINS: tuple[str, ...] = (
    "tilde.club",
    "tilde.town",
    "tilde.team",
    "tilde.pink",
    "tilde.zone",
    "tilde.institute",
    "tilde.guru",
    "tilde.fun",
    "tildeverse.org",
    "ctrl-c.club",
    "sdf.org",
    "envs.net",
    "rawtext.club",
)

# Unlisted pubnix hosts still score as tilde communities for /~user pages.
TILDE_SCORE_MODIFIER = 1.10
TILDE_REASON = _TILDE

URL_SHORTENERS: frozenset[str] = frozenset(
    {
        "bit.ly",
        "tinyurl.com",
        "short.link",
        "ow.ly",
        "buff.ly",
        "t.co",
        "goo.gl",
        "rebrand.ly",
        "bl.ink",
        "lnk.to",
        "smarturl.it",
    }
)

# Host suffixes that small self-run fediverse instances tend to use.
INDIE_FEDERATED_SUFFIXES: tuple[str, ...] = (".social", ".community", ".club", ".im")

# Centrally run instances with those suffixes; treated as corporate.
LARGE_FEDERATED_INSTANCES: frozenset[str] = frozenset(
    {
        "mastodon.social",
        "mstdn.social",
        "techhub.social",
        "pixelfed.social",
        "bsky.social",
        "ohai.social",
        "mindly.social",
        "home.social",
        "aus.social",
        "sfba.social",
        "kolektiva.social",
        "universeodon.social",
        "toot.community",
        "c.im",
    }
)

# Hosted blog services: "<user>.<service>.<tld>" → canonical brand domain.
BLOG_BRANDS: dict[str, str] = {
    "wordpress.com": "wordpress.com",
    "blogspot.com": "blogger.com",
    "tumblr.com": "tumblr.com",
    "medium.com": "medium.com",
    "substack.com": "substack.com",
    "ghost.io": "ghost.io",
    "wixsite.com": "wix.com",
    "squarespace.com": "squarespace.com",
    "weebly.com": "weebly.com",
}
