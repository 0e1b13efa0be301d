# tests/unit/providers/test_base_provider.py — v1
"""Tests for providers/base_provider.py — BaseImageProvider contract."""

from __future__ import annotations

import pytest

from warhol.providers.base_provider import DEFAULT_TIMEOUT_SECONDS, BaseImageProvider


class TestBaseImageProvider:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseImageProvider(api_key="k", base_url="u")  # type: ignore[abstract]

    def test_has_required_methods(self):
        assert hasattr(BaseImageProvider, "generate_image")
        assert hasattr(BaseImageProvider, "provider_name")

    def test_fixed_timeout(self):
        assert DEFAULT_TIMEOUT_SECONDS == 180.0
