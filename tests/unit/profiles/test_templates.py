# tests/unit/profiles/test_templates.py — v1
"""Tests for profiles/templates.py — template rendering and no-overwrite rule."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from warhol.core.errors import TemplateExistsError
from warhol.profiles.store import parse_profile
from warhol.profiles.templates import render_template, write_template


class TestRenderTemplate:
    def test_style_template_parses(self):
        data = yaml.safe_load(render_template("styles", "noir"))
        assert data["name"] == "noir"
        assert data["prompt_prefix"]
        assert data["seed_policy"]["seed"] == 42

    def test_character_template_parses(self):
        data = yaml.safe_load(render_template("characters", "matt"))
        assert data["name"] == "matt"
        assert data["prompt"] == ""
        assert len(data["outfit"]) == 3


class TestWriteTemplate:
    def test_creates_parent_dirs(self, tmp_path: Path):
        target = tmp_path / "styles" / "noir.yaml"
        written = write_template("styles", "noir", target)
        assert written == target
        profile = parse_profile("styles", str(target))
        assert profile.name == "noir"
        assert profile.negative_prompt == ("avoid brand marks", "avoid unrelated text")

    def test_refuses_overwrite(self, tmp_path: Path):
        target = tmp_path / "matt.yaml"
        target.write_text("name: keep\n")
        with pytest.raises(TemplateExistsError):
            write_template("characters", "matt", target)
        assert target.read_text() == "name: keep\n"
