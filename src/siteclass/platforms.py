# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Registry of corporate platforms and their profile path patterns.

A profile page on one of these platforms is never indexed itself, but the
links on it (bio, "website" field, pinned post) often point at personal
sites, so the classifier hands profiles to link extraction.

Pattern notes:
- ``/*`` with exclusions is used where usernames live at the top level.
- ``/*/*`` in exclusions keeps repository / post pages out (github, gitlab).
- ``/*.host.tld`` patterns mark platforms that give users their own
  subdomain; the ``host.tld`` part doubles as a hosted-subdomain wildcard.
"""

from __future__ import annotations

import re

from .models import PlatformCategory as C
from .models import PlatformPattern as P

_FEDI = ("bio", "profile_metadata")

CORPORATE_PLATFORMS: tuple[P, ...] = (
    # ---- social media ----
    P("youtube.com", ("/@*", "/channel/*", "/c/*", "/user/*"), C.SOCIAL_MEDIA,
      link_locations=("about", "description", "channel_header")),
    P("twitter.com", ("/*",), C.SOCIAL_MEDIA,
      exclude_patterns=("/home", "/explore", "/settings", "/login", "/signup"),
      link_locations=("bio", "pinned_tweet")),
    P("x.com", ("/*",), C.SOCIAL_MEDIA,
      exclude_patterns=("/home", "/explore", "/settings", "/login", "/signup"),
      link_locations=("bio", "pinned_post")),
    P("instagram.com", ("/*",), C.SOCIAL_MEDIA,
      exclude_patterns=("/accounts/*", "/explore", "/reels", "/direct"),
      link_locations=("bio", "link_in_bio")),
    P("facebook.com", ("/people/*", "/profile.php", "/*"), C.SOCIAL_MEDIA,
      exclude_patterns=("/groups", "/marketplace", "/watch", "/events", "/pages"),
      link_locations=("about", "intro")),
    P("linkedin.com", ("/in/*", "/company/*"), C.SOCIAL_MEDIA, link_locations=("about", "contact_info")),
    P("tiktok.com", ("/@*",), C.SOCIAL_MEDIA, link_locations=("bio",)),
    P("threads.net", ("/@*",), C.SOCIAL_MEDIA, link_locations=("bio",)),
    P("bsky.app", ("/profile/*",), C.SOCIAL_MEDIA, link_locations=("bio", "description")),
    P("pinterest.com", ("/*",), C.SOCIAL_MEDIA,
      exclude_patterns=("/pin/*", "/search", "/ideas"), link_locations=("about", "website")),
    P("snapchat.com", ("/add/*",), C.SOCIAL_MEDIA, link_locations=("profile",)),
    # ---- development ----
    P("github.com", ("/*",), C.DEVELOPMENT,
      exclude_patterns=("/features", "/pricing", "/explore", "/marketplace", "/sponsors", "/*/*", "/orgs/*"),
      link_locations=("profile_readme", "bio", "website_field")),
    P("gitlab.com", ("/*",), C.DEVELOPMENT,
      exclude_patterns=("/explore", "/projects", "/groups", "/-/*", "/*/*"), link_locations=("profile", "bio")),
    P("bitbucket.org", ("/*",), C.DEVELOPMENT,
      exclude_patterns=("/repo", "/product", "/*/*"), link_locations=("profile",)),
    P("codepen.io", ("/*",), C.DEVELOPMENT,
      exclude_patterns=("/pen/*", "/pens", "/trending", "/challenges"), link_locations=("profile", "website_field")),
    P("codesandbox.io", ("/u/*",), C.DEVELOPMENT, link_locations=("profile",)),
    P("replit.com", ("/@*",), C.DEVELOPMENT, link_locations=("profile", "bio")),
    P("glitch.com", ("/@*",), C.DEVELOPMENT, link_locations=("profile",)),
    P("stackoverflow.com", ("/users/*",), C.DEVELOPMENT, link_locations=("profile", "about")),
    # ---- large federated instances ----
    P("mastodon.social", ("/@*",), C.FEDERATED, link_locations=_FEDI),
    P("mastodon.online", ("/@*",), C.FEDERATED, link_locations=_FEDI),
    P("fosstodon.org", ("/@*",), C.FEDERATED, link_locations=_FEDI),
    P("mastodon.world", ("/@*",), C.FEDERATED, link_locations=_FEDI),
    P("mstdn.social", ("/@*",), C.FEDERATED, link_locations=_FEDI),
    P("mas.to", ("/@*",), C.FEDERATED, link_locations=_FEDI),
    P("techhub.social", ("/@*",), C.FEDERATED, link_locations=_FEDI),
    # ---- content ----
    P("medium.com", ("/@*",), C.CONTENT, link_locations=("bio", "about")),
    P("substack.com", ("/@*",), C.CONTENT, link_locations=("about", "bio")),
    P("dev.to", ("/*",), C.CONTENT,
      exclude_patterns=("/t/*", "/tags", "/search", "/top"), link_locations=("bio", "links")),
    P("hashnode.dev", ("/@*",), C.CONTENT, link_locations=("bio", "social_links")),
    P("wordpress.com", ("/*.wordpress.com",), C.CONTENT, link_locations=("about", "sidebar")),
    P("blogger.com", ("/*.blogspot.com",), C.CONTENT, link_locations=("about", "sidebar")),
    P("tumblr.com", ("/*.tumblr.com",), C.CONTENT, link_locations=("about", "description")),
    P("ghost.io", ("/*.ghost.io",), C.CONTENT, link_locations=("about", "author")),
    # news outlets: staff author pages
    P("cnn.com", ("/profiles/*", "/author/*"), C.CONTENT, link_locations=("bio", "author_page")),
    P("bbc.com", ("/news/correspondents/*", "/programmes/profiles/*"), C.CONTENT,
      link_locations=("correspondent_page",)),
    P("nytimes.com", ("/by/*", "/column/*"), C.CONTENT, link_locations=("author_bio",)),
    P("theguardian.com", ("/profile/*",), C.CONTENT, link_locations=("author_page",)),
    # ---- creative ----
    P("behance.net", ("/*",), C.CREATIVE,
      exclude_patterns=("/gallery/*", "/search", "/joblist"), link_locations=("about", "website")),
    P("dribbble.com", ("/*",), C.CREATIVE,
      exclude_patterns=("/shots/*", "/jobs", "/designers"), link_locations=("bio", "links")),
    P("deviantart.com", ("/*",), C.CREATIVE,
      exclude_patterns=("/art/*", "/daily-deviations", "/watch"), link_locations=("bio", "website")),
    P("artstation.com", ("/*",), C.CREATIVE,
      exclude_patterns=("/artwork/*", "/marketplace", "/learning"), link_locations=("bio", "portfolio_link")),
    P("flickr.com", ("/people/*", "/photos/*"), C.CREATIVE, link_locations=("about", "website")),
    P("500px.com", ("/*",), C.CREATIVE,
      exclude_patterns=("/photo/*", "/popular", "/fresh"), link_locations=("bio", "website")),
    P("unsplash.com", ("/@*",), C.CREATIVE, link_locations=("bio", "portfolio_link")),
    # ---- streaming ----
    P("twitch.tv", ("/*",), C.STREAMING,
      exclude_patterns=("/directory", "/videos/*", "/search"), link_locations=("about", "panels")),
    P("spotify.com", ("/artist/*", "/user/*"), C.STREAMING, link_locations=("artist_bio", "profile")),
    P("soundcloud.com", ("/*",), C.STREAMING,
      exclude_patterns=("/discover", "/stream", "/upload"), link_locations=("bio", "links")),
    P("bandcamp.com", ("/*.bandcamp.com",), C.STREAMING, link_locations=("about", "links")),
    P("vimeo.com", ("/*",), C.STREAMING,
      exclude_patterns=("/watch", "/categories", "/stock"), link_locations=("about", "website")),
    P("netflix.com", ("/title/*",), C.STREAMING, link_locations=("cast_info", "creator_info")),
    # ---- marketplace / creator support ----
    P("etsy.com", ("/shop/*", "/people/*"), C.MARKETPLACE, link_locations=("shop_announcement", "about")),
    P("patreon.com", ("/*",), C.MARKETPLACE,
      exclude_patterns=("/creators", "/c/*", "/login", "/signup"), link_locations=("about", "creator_page")),
    P("ko-fi.com", ("/*",), C.MARKETPLACE,
      exclude_patterns=("/explore", "/gold", "/commissions"), link_locations=("about", "links")),
    P("buymeacoffee.com", ("/*",), C.MARKETPLACE,
      exclude_patterns=("/explore", "/creators"), link_locations=("about", "links")),
    P("gumroad.com", ("/*",), C.MARKETPLACE,
      exclude_patterns=("/discover", "/features"), link_locations=("profile", "about")),
    # ---- community ----
    P("reddit.com", ("/user/*", "/u/*"), C.COMMUNITY, exclude_patterns=("/r/*",), link_locations=("profile", "about")),
    P("discord.com", ("/users/*",), C.COMMUNITY, link_locations=("profile",)),
    P("discord.gg", ("/*",), C.COMMUNITY, link_locations=("server_about",)),
    P("slack.com", ("/*.slack.com",), C.COMMUNITY, link_locations=("profile",)),
    P("telegram.org", ("/*",), C.COMMUNITY, link_locations=("bio",)),
    P("t.me", ("/*",), C.COMMUNITY, link_locations=("bio",)),
    # ---- link-in-bio services ----
    P("linktr.ee", ("/*",), C.LINK_SERVICE, link_locations=("links",)),
    P("linkin.bio", ("/*",), C.LINK_SERVICE, link_locations=("links",)),
    P("bio.link", ("/*",), C.LINK_SERVICE, link_locations=("links",)),
    P("beacons.ai", ("/*",), C.LINK_SERVICE, link_locations=("links",)),
    P("carrd.co", ("/*",), C.LINK_SERVICE, link_locations=("links",)),
    P("about.me", ("/*",), C.LINK_SERVICE, link_locations=("links",)),
    # ---- knowledge bases (institutional: every page, rejected outright) ----
    P("wikipedia.org", ("/*",), C.KNOWLEDGE_BASE, link_locations=("external_links", "references")),
    P("wikimedia.org", ("/*",), C.KNOWLEDGE_BASE, link_locations=("external_links",)),
    P("wikidata.org", ("/wiki/*",), C.KNOWLEDGE_BASE, link_locations=("external_links",)),
    P("stackexchange.com", ("/users/*",), C.KNOWLEDGE_BASE, link_locations=("profile", "about")),
    P("imdb.com", ("/name/*", "/title/*"), C.KNOWLEDGE_BASE, link_locations=("bio", "external_sites")),
)

# Hosts that look like a fediverse instance. Coarse on purpose: the
# classifier lets small instances through before these are consulted.
FEDERATED_INSTANCE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        r"^mastodon\.",
        r"^mstdn\.",
        r"^mas\.",
        r"\.social$",
        r"\.community$",
        r"\.im$",
        r"\.club$",
    )
)

# Profile path for the generic descriptor synthesized for such hosts.
FEDERATED_PROFILE_PATTERNS: tuple[str, ...] = ("/@*",)
