# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Subprocess-based CLI smoke tests.

test_cli.py calls ``main()`` in-process; these run ``python -m siteclass.cli``
as a real process to catch traceback leaks, exit-code mismatches and
stdout / stderr separation bugs.
"""

from __future__ import annotations

import json
import subprocess
import sys

import pytest

CLI = [sys.executable, "-m", "siteclass.cli"]
TIMEOUT = 30


@pytest.mark.smoke
class TestCLISmoke:
    @staticmethod
    def _run(*args: str, stdin: str | None = None) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            [*CLI, *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            input=stdin,
            timeout=TIMEOUT,
        )

    def test_help(self):
        proc = self._run("--help")
        assert proc.returncode == 0
        assert "classify" in proc.stdout

    def test_classify_json(self):
        proc = self._run("classify", "--format", "json", "https://myusername.wordpress.com/")
        assert proc.returncode == 0, proc.stderr
        (row,) = json.loads(proc.stdout)
        assert row["indexing_purpose"] == "link_extraction"
        assert row["platform_name"] == "wordpress.com"

    def test_stdin_recommend(self):
        proc = self._run("recommend", stdin="https://bit.ly/abc\n")
        assert proc.returncode == 0, proc.stderr
        assert proc.stdout.strip().endswith("url_shortener")

    def test_non_numeric_score_no_traceback(self, tmp_path):
        export = tmp_path / "sites.jsonl"
        export.write_text(
            '{"id": "7", "url": "https://github.com/torvalds", "communityScore": "n/a"}\n',
            encoding="utf-8",
        )
        proc = self._run("audit", "--format", "json", str(export))
        assert proc.returncode == 1
        assert proc.stderr.startswith("Error: record '7'")
        assert "Traceback" not in proc.stderr
        assert proc.stdout == ""

    def test_numeric_string_scores_accepted(self, tmp_path):
        export = tmp_path / "sites.jsonl"
        row = '{"id": "1", "url": "https://github.com/torvalds", "communityScore": "12"}\n'
        export.write_text(row, encoding="utf-8")
        proc = self._run("audit", "--format", "json", str(export))
        assert proc.returncode == 0, proc.stderr
        assert json.loads(proc.stdout)["summary"]["false_positives"] == 1

    def test_bad_config_no_traceback(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("platforms: [\n", encoding="utf-8")
        proc = self._run("--config", str(path), "classify", "--format", "json", "https://jdoe.me/")
        assert proc.returncode == 1
        assert proc.stderr.startswith("Error:")
        assert "Traceback" not in proc.stderr
        assert proc.stdout == ""
