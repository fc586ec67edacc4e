# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""siteclass exception hierarchy.

All siteclass-specific errors inherit from SiteClassError, so callers can
catch the base class for any failure or a subclass for targeted handling.
The classifier itself never lets these escape ``classify()``.
"""

from __future__ import annotations


class SiteClassError(Exception):
    """Base exception for all siteclass errors."""


class InvalidUrlError(SiteClassError):
    """URL could not be parsed into scheme + host + path."""

    def __init__(self, message: str, *, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class ConfigError(SiteClassError):
    """Classifier configuration file is unreadable or malformed."""

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path
