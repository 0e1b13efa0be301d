# src/generation/models.py — v1
"""Generation domain models: request, manifest and result of one run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class GenerationRequest(BaseModel):
    """Caller inputs for one generation run."""

    model_config = ConfigDict(frozen=True)

    style: str
    prompt: str
    character: str | None = None
    provider: str | None = None
    model: str | None = None
    size: str | None = None
    quality: str | None = None
    output_dir: Path | None = None
    dry_run: bool = False


class GenerationManifest(BaseModel):
    """Record of one run, written to manifest-<ts>.json.

    Optional fields are omitted from the JSON document when unset:
    size/quality only for providers that take them, character fields only
    when a character was supplied, image_path only when an image was written.
    """

    model_config = ConfigDict(frozen=True)

    created_at: str
    provider: str
    model: str
    size: str | None = None
    quality: str | None = None
    style_input: str
    style_file: str
    character: str | None = None
    character_file: str | None = None
    prompt: str
    final_prompt: str
    image_path: str | None = None
    dry_run: bool

    def to_json(self) -> str:
        return self.model_dump_json(indent=2, exclude_none=True)


class GenerationResult(BaseModel):
    """What the orchestrator hands back to the caller."""

    model_config = ConfigDict(frozen=True)

    final_prompt: str
    manifest: GenerationManifest
    manifest_path: Path
    image_path: Path | None = None
