# tests/unit/generation/test_models.py — v1
"""Tests for generation/models.py — manifest field presence rules."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from warhol.generation.models import GenerationManifest


def _manifest(**overrides) -> GenerationManifest:
    data = {
        "created_at": "2026-02-07T14:05:09Z",
        "provider": "google",
        "model": "gemini-2.5-flash-image",
        "style_input": "noir",
        "style_file": "styles/noir.yaml",
        "prompt": "a cat",
        "final_prompt": "Neon noir. a cat",
        "dry_run": True,
    }
    data.update(overrides)
    return GenerationManifest(**data)


class TestGenerationManifest:
    def test_optional_fields_omitted(self):
        doc = json.loads(_manifest().to_json())
        for key in ("size", "quality", "character", "character_file", "image_path"):
            assert key not in doc
        assert doc["dry_run"] is True

    def test_field_order(self):
        doc = json.loads(_manifest(
            size="1024x1024", quality="medium", character="matt",
            character_file="characters/matt.yaml", image_path="out/image.png",
            dry_run=False,
        ).to_json())
        assert list(doc) == [
            "created_at", "provider", "model", "size", "quality",
            "style_input", "style_file", "character", "character_file",
            "prompt", "final_prompt", "image_path", "dry_run",
        ]

    def test_dry_run_false_is_kept(self):
        doc = json.loads(_manifest(dry_run=False, image_path="x.png").to_json())
        assert doc["dry_run"] is False

    def test_immutable(self):
        m = _manifest()
        with pytest.raises(ValidationError):
            m.final_prompt = "changed"  # type: ignore[misc]
