# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""siteclass CLI: classify, recommend, audit, platforms commands.

Usage:
    python -m siteclass.cli classify URL [URL ...] [--format table|json]
    python -m siteclass.cli recommend URL [URL ...]
    python -m siteclass.cli audit EXPORT.json|EXPORT.jsonl [--format table|json]
    python -m siteclass.cli platforms [--category CATEGORY]

Global options: ``--config PATH`` (or ``$SITECLASS_CONFIG``), ``-v``.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

import structlog

from .audit import SiteRecord, audit_sites
from .classifier import classify, get_indexing_recommendation
from .config import ClassifierConfig, config_from_env, load_config
from .errors import SiteClassError
from .logging_config import configure
from .models import PlatformCategory

logger = logging.getLogger(__name__)


def _require_cli_deps() -> None:
    """Check that CLI optional dependencies are installed."""
    try:
        from tabulate import tabulate  # noqa: F401
    except ImportError as e:
        print(
            f"Missing CLI dependency: {e.name}\nInstall with: pip install site-classifier[cli]",
            file=sys.stderr,
        )
        sys.exit(1)


def _resolve_config(args: argparse.Namespace) -> ClassifierConfig:
    if args.config:
        return load_config(args.config)
    return config_from_env()


def _read_urls(args: argparse.Namespace) -> list[str]:
    urls = list(args.urls)
    if not urls or urls == ["-"]:
        urls = [line.strip() for line in sys.stdin if line.strip()]
    return urls


def _read_records(path: Path) -> list[SiteRecord]:
    """Load a JSON array or JSON-lines export of site records."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SiteClassError(f"cannot read {path}: {e}") from e

    stripped = text.lstrip()
    try:
        if stripped.startswith("["):
            rows = json.loads(stripped)
        else:
            rows = [json.loads(line) for line in text.splitlines() if line.strip()]
    except json.JSONDecodeError as e:
        raise SiteClassError(f"{path}: invalid JSON ({e})") from e

    if not all(isinstance(r, dict) for r in rows):
        raise SiteClassError(f"{path}: every record must be a JSON object")
    return [SiteRecord.from_mapping(r) for r in rows]


# ── Commands ─────────────────────────────────────────────────────────────────


def cmd_classify(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    urls = _read_urls(args)
    results = [(url, classify(url, config=config)) for url in urls]

    if args.format == "json":
        print(json.dumps([{"url": url, **r.to_dict()} for url, r in results], indent=2))
        return

    from tabulate import tabulate

    rows = [
        (
            url,
            r.platform_type,
            r.indexing_purpose,
            f"{r.confidence:.2f}",
            f"{r.score_modifier:.2f}",
            r.platform_name or "-",
            ", ".join(r.reasons),
        )
        for url, r in results
    ]
    headers = ["URL", "Type", "Purpose", "Conf", "Modifier", "Platform", "Reasons"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))


def cmd_recommend(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    for url in _read_urls(args):
        rec = get_indexing_recommendation(url, config=config)
        if args.format == "json":
            print(json.dumps({"url": url, **dataclasses.asdict(rec)}))
        else:
            index = "index" if rec.should_index else "skip"
            links = "+links" if rec.should_extract_links else ""
            print(f"{url}\t{index}{links}\t{rec.reason}")


def cmd_audit(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    records = _read_records(Path(args.export))
    report = audit_sites(records, config=config)

    if args.format == "json":
        print(json.dumps(dataclasses.asdict(report), indent=2))
        return

    from tabulate import tabulate

    print("Corporate profiles in the index (demote to link extraction):")
    if report.corporate_profiles:
        rows = [(c.id, c.url, c.platform_name or "-", c.current_score) for c in report.corporate_profiles]
        print(tabulate(rows, headers=["ID", "URL", "Platform", "Score"], tablefmt="simple"))
    else:
        print("  none")

    print("\nIndie platform pages to upgrade:")
    if report.indie_upgrades:
        rows = [
            (u.id, u.url, u.previous_platform_type or "-", u.current_score, f"+{u.score_bonus}")
            for u in report.indie_upgrades
        ]
        print(tabulate(rows, headers=["ID", "URL", "Was", "Score", "Bonus"], tablefmt="simple"))
    else:
        print("  none")

    s = report.summary
    print(
        f"\nAudited {s.total_sites} sites: {s.corporate_found} corporate profiles "
        f"({s.false_positives} with a score), {s.indie_upgrades} indie upgrades, "
        f"{s.sites_to_update} to update"
    )


def cmd_platforms(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    platforms = [p for p in config.platforms if args.category is None or p.category == args.category]

    if args.format == "json":
        print(json.dumps([dataclasses.asdict(p) for p in platforms], indent=2))
        return

    from tabulate import tabulate

    rows = [
        (p.domain, p.category, " ".join(p.profile_patterns), " ".join(p.exclude_patterns) or "-")
        for p in platforms
    ]
    print(tabulate(rows, headers=["Domain", "Category", "Profile", "Exclude"], tablefmt="simple"))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Site classification / indexing-decision CLI",
        prog="python -m siteclass.cli",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--config", type=str, metavar="PATH", help="YAML config (default: $SITECLASS_CONFIG)")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")
    subparsers = parser.add_subparsers(dest="command", required=True)

    _classify_epilog = """\
examples:
  %(prog)s https://alice.neocities.org/            One URL, table output
  %(prog)s --format json https://github.com/torvalds
  cat urls.txt | %(prog)s -                          URLs from stdin
"""
    p_classify = subparsers.add_parser(
        "classify",
        help="Classify URLs",
        epilog=_classify_epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_classify.add_argument("urls", nargs="*", metavar="URL", help="URLs to classify ('-' or none: stdin)")
    p_classify.add_argument("--format", choices=["table", "json"], default="table")

    p_recommend = subparsers.add_parser("recommend", help="Indexing recommendation per URL")
    p_recommend.add_argument("urls", nargs="*", metavar="URL")
    p_recommend.add_argument("--format", choices=["text", "json"], default="text")

    p_audit = subparsers.add_parser("audit", help="Re-classify an export of stored site records")
    p_audit.add_argument("export", metavar="FILE", help="JSON array or JSON-lines file of site records")
    p_audit.add_argument("--format", choices=["table", "json"], default="table")

    p_platforms = subparsers.add_parser("platforms", help="List the corporate platform registry")
    p_platforms.add_argument("--category", choices=[c.value for c in PlatformCategory])
    p_platforms.add_argument("--format", choices=["table", "json"], default="table")

    commands = {
        "classify": cmd_classify,
        "recommend": cmd_recommend,
        "audit": cmd_audit,
        "platforms": cmd_platforms,
    }

    args = parser.parse_args(argv)

    if args.format == "table":
        _require_cli_deps()

    configure(json_output=args.log_json, level="DEBUG" if args.verbose else "WARNING")

    structlog.contextvars.bind_contextvars(command=args.command)
    try:
        commands[args.command](args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)
    except SiteClassError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            logger.exception("Command %s failed", args.command)
        sys.exit(1)
    finally:
        structlog.contextvars.unbind_contextvars("command")


if __name__ == "__main__":
    main()
