# src/generation/orchestrator.py — v1
"""Generation orchestrator: one linear run from profile references to files.

States, in order (any failure aborts; nothing is retried):
  start → profiles_resolved → prompt_composed → model_resolved
        → image_generated | dry_run_skip → artifact_written
        → manifest_written

The manifest is written last, after the image write succeeded (or was
skipped by a dry run), so an aborted run leaves no manifest on disk.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from warhol.generation.models import (
    GenerationManifest,
    GenerationRequest,
    GenerationResult,
)
from warhol.logging.context import clear_context, set_run_context, set_step
from warhol.profiles.models import CharacterProfile
from warhol.profiles.store import ProfileStore
from warhol.prompting.composer import compose_prompt
from warhol.providers.provider_factory import (
    create_provider,
    normalize_provider_id,
    resolve_model,
    supports_size_quality,
)
from warhol.storage import layout
from warhol.storage.local_writer import LocalWriter

if TYPE_CHECKING:
    import httpx

    from warhol.config.settings import Settings
    from warhol.providers.base_provider import BaseImageProvider
    from warhol.providers.credentials import CredentialSource
    from warhol.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)

ProviderFactory = Callable[..., "BaseImageProvider"]


class GenerationOrchestrator:
    """Top-level workflow for a single image generation.

    Args:
        settings: Application settings (defaults, endpoints, output dir).
        store: Profile store; searches the configured profile roots by default.
        credentials: Credential lookup handed to the provider factory.
        writer: Output writer; local filesystem by default.
        provider_factory: Callable building a provider (see create_provider).
        transport: Optional httpx transport forwarded to the provider.
        clock: Returns the current UTC time; fixes timestamps in tests.
    """

    def __init__(
        self,
        settings: Settings,
        store: ProfileStore | None = None,
        credentials: CredentialSource | None = None,
        writer: BaseOutputWriter | None = None,
        provider_factory: ProviderFactory = create_provider,
        transport: httpx.BaseTransport | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._settings = settings
        self._store = store or ProfileStore(settings.profile_roots_list)
        self._credentials = credentials
        self._writer = writer or LocalWriter()
        self._provider_factory = provider_factory
        self._transport = transport
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def run(self, request: GenerationRequest) -> GenerationResult:
        """Execute one generation run.

        Raises:
            ProfileNotFoundError, ProfileParseError: Profile resolution failed.
            UnsupportedProviderError: Unknown provider id.
            MissingCredentialError, ProviderError, MissingImageDataError,
            ProviderTransportError: Provider dispatch failed.
            ArtifactWriteError: Output directory, image or manifest write failed.
        """
        started = self._clock()
        timestamp = layout.run_timestamp(started)
        provider_id = normalize_provider_id(
            request.provider or self._settings.default_provider
        )
        set_run_context(timestamp, provider_id)
        step = "start"
        set_step(step)
        t0 = time.monotonic()

        try:
            style, style_path = self._store.load_style(request.style)
            character: CharacterProfile | None = None
            character_path: str | None = None
            if request.character:
                character, character_path = self._store.load_character(
                    request.character
                )
            step = _advance("profiles_resolved")

            final_prompt = compose_prompt(style, character, request.prompt)
            step = _advance("prompt_composed")
            logger.debug("Final prompt: %s", final_prompt)

            model = resolve_model(provider_id, request.model)
            step = _advance("model_resolved")

            size: str | None = None
            quality: str | None = None
            if supports_size_quality(provider_id):
                size = request.size or self._settings.openai_image_size
                quality = request.quality or self._settings.openai_image_quality

            output_dir = Path(request.output_dir or self._settings.output_dir)
            paths = layout.artifact_paths(output_dir, timestamp)
            image_path: Path | None = None

            if request.dry_run:
                step = _advance("dry_run_skip")
                self._writer.ensure_dir(output_dir)
            else:
                image_bytes = self._dispatch(
                    provider_id, model, final_prompt, size, quality
                )
                step = _advance("image_generated")
                self._writer.ensure_dir(output_dir)
                self._writer.write(paths.image, image_bytes)
                image_path = paths.image
                step = _advance("artifact_written")
                logger.info("Image written: %s (%d bytes)", image_path, len(image_bytes))

            manifest = GenerationManifest(
                created_at=_rfc3339(started),
                provider=provider_id,
                model=model,
                size=size,
                quality=quality,
                style_input=request.style,
                style_file=style_path,
                character=request.character or None,
                character_file=character_path,
                prompt=request.prompt,
                final_prompt=final_prompt,
                image_path=str(image_path) if image_path is not None else None,
                dry_run=request.dry_run,
            )
            self._writer.write(paths.manifest, manifest.to_json())
            step = _advance("manifest_written")

        except Exception:
            logger.debug("Generation aborted after step %s", step)
            raise
        finally:
            clear_context()

        logger.info(
            "Generation complete: provider=%s model=%s dry_run=%s in %.1fs",
            provider_id, model, request.dry_run, time.monotonic() - t0,
        )
        return GenerationResult(
            final_prompt=final_prompt,
            manifest=manifest,
            manifest_path=paths.manifest,
            image_path=image_path,
        )

    def _dispatch(
        self,
        provider_id: str,
        model: str,
        prompt: str,
        size: str | None,
        quality: str | None,
    ) -> bytes:
        """Build the provider (credential lookup happens here) and call it once."""
        provider = self._provider_factory(
            provider_id,
            credentials=self._credentials,
            settings=self._settings,
            transport=self._transport,
        )
        with provider:
            logger.info("Requesting image: provider=%s model=%s", provider_id, model)
            return provider.generate_image(model, prompt, size=size, quality=quality)


def _advance(step: str) -> str:
    set_step(step)
    logger.debug("Reached %s", step)
    return step


def _rfc3339(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
