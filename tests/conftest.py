# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Shared test configuration and fixtures."""

try:
    import siteclass  # noqa: F401
except ImportError:
    raise ImportError("siteclass is not installed. Run: pip install -e '.[dev]'") from None

import pytest

from siteclass.config import DEFAULT_CONFIG


@pytest.fixture
def config():
    """The built-in classifier tables."""
    return DEFAULT_CONFIG
