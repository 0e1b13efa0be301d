# tests/unit/storage/test_layout.py — v1
"""Tests for storage/layout.py — artifact naming and project defaults."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from warhol.storage import layout


class TestRunTimestamp:
    def test_format(self):
        ts = datetime(2026, 2, 7, 14, 5, 9, tzinfo=timezone.utc)
        assert layout.run_timestamp(ts) == "20260207-140509"

    def test_converted_to_utc(self):
        ts = datetime(2026, 2, 7, 16, 5, 9, tzinfo=timezone(timedelta(hours=2)))
        assert layout.run_timestamp(ts) == "20260207-140509"


class TestArtifactPaths:
    def test_shared_timestamp(self):
        paths = layout.artifact_paths(Path("out"), "20260207-140509")
        assert paths.image == Path("out/image-20260207-140509.png")
        assert paths.manifest == Path("out/manifest-20260207-140509.json")


class TestDefaultProjectPath:
    def test_prefers_existing_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "styles").mkdir()
        monkeypatch.chdir(tmp_path)
        assert layout.default_project_path("styles") == Path("styles")

    def test_uses_parent_when_in_subdir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "outputs").mkdir()
        (tmp_path / "cli").mkdir()
        monkeypatch.chdir(tmp_path / "cli")
        assert layout.default_project_path("outputs") == Path("../outputs")

    def test_fallback_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert layout.default_project_path("characters") == Path("characters")
