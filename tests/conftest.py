# tests/conftest.py — v1
"""Shared test fixtures for unit tests.

Provides a synthetic project tree with style/character profiles, fixed
clocks and settings isolated from any local .env file.
No external dependencies: HTTP goes through httpx.MockTransport.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import httpx
import pytest

from warhol.config.settings import Settings
from warhol.logging.context import clear_context
from warhol.profiles.models import CharacterProfile, StyleProfile

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-payload"
PNG_B64 = base64.b64encode(PNG_BYTES).decode()

NOIR_YAML = """\
name: noir
description: "Neon noir"
prompt_prefix:
  - "high contrast"
negative_prompt:
  - "text"
"""

MATT_YAML = """\
name: matt
description: "Lanky courier"
traits:
  - "30s"
  - "buzz cut"
outfit:
  - "yellow raincoat"
prompt: ""
"""


# === FIXTURES: Settings / clock ===


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings with no .env, outputs under tmp_path."""
    return Settings(_env_file=None, output_dir=tmp_path / "outputs")


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    moment = datetime(2026, 2, 7, 14, 5, 9, tzinfo=timezone.utc)
    return lambda: moment


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


# === FIXTURES: Profiles on disk ===


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project dir with styles/noir.yaml and characters/matt.yaml."""
    root = tmp_path / "project"
    (root / "styles").mkdir(parents=True)
    (root / "characters").mkdir(parents=True)
    (root / "styles" / "noir.yaml").write_text(NOIR_YAML, encoding="utf-8")
    (root / "characters" / "matt.yaml").write_text(MATT_YAML, encoding="utf-8")
    return root


@pytest.fixture
def noir_style() -> StyleProfile:
    return StyleProfile(
        name="noir",
        description="Neon noir",
        prompt_prefix=["high contrast"],
        negative_prompt=["text"],
    )


@pytest.fixture
def matt_character() -> CharacterProfile:
    return CharacterProfile(
        name="matt",
        description="Lanky courier",
        traits=["30s", "buzz cut"],
        outfit=["yellow raincoat"],
    )


# === FIXTURES: HTTP ===


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


class RecordingTransport(httpx.MockTransport):
    """MockTransport that also keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    def _make(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        *,
        status_code: int = 200,
        json_body: object = None,
    ) -> RecordingTransport:
        def _static(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=json_body)

        return RecordingTransport(handler or _static)

    return _make


@pytest.fixture
def google_image_body() -> dict:
    return {
        "candidates": [
            {"content": {"parts": [
                {"text": "Here is your image"},
                {"inlineData": {"mimeType": "image/png", "data": PNG_B64}},
            ]}}
        ]
    }


@pytest.fixture
def openai_image_body() -> dict:
    return {"created": 1, "data": [{"b64_json": PNG_B64}]}
