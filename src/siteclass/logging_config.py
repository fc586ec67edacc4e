# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""structlog + stdlib bridge. Terminal: ConsoleRenderer, batch jobs: JSONRenderer.

Leaf module — no siteclass imports. Library modules only call
``logging.getLogger(__name__)``; the embedding process calls ``configure()``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def configure(*, json_output: bool = False, level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure structlog with stdlib bridge.

    Args:
        json_output: True for JSON lines (audit jobs, log shippers), False for human-readable.
        level: Root logger level (default INFO).
        stream: Log destination (default: sys.stderr at call time).
    """
    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if json_output
        else structlog.dev.ConsoleRenderer(colors=(stream or sys.stderr).isatty())
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def configure_from_env(*, default_level: str = "INFO") -> None:
    """Configure from ``SITECLASS_LOG_JSON`` / ``SITECLASS_LOG_LEVEL``."""
    json_output = os.environ.get("SITECLASS_LOG_JSON", "").strip().lower() in _TRUTHY
    level = os.environ.get("SITECLASS_LOG_LEVEL", "").strip() or default_level
    configure(json_output=json_output, level=level)
