# src/providers/openai_provider.py — v1
"""OpenAI Images adapter implementing BaseImageProvider.

REST call to POST {base}/images/generations with bearer auth. The image
comes back inline as base64 or, for some models, as a download URL.
"""

from __future__ import annotations

import logging

from warhol.core.errors import MissingImageDataError, ProviderError
from warhol.providers.base_provider import BaseImageProvider
from warhol.providers.models import OpenAIImageRequest, OpenAIImageResponse

logger = logging.getLogger(__name__)


class OpenAIImageProvider(BaseImageProvider):
    """OpenAI image generation (gpt-image-1, dall-e-*)."""

    name = "openai"
    default_model = "gpt-image-1"
    credential_sources = ("OPENAI_API_KEY",)
    base_url_setting = "openai_base_url"
    supports_size_quality = True

    def generate_image(
        self,
        model: str,
        prompt: str,
        size: str | None = None,
        quality: str | None = None,
    ) -> bytes:
        request = OpenAIImageRequest(
            model=model,
            prompt=prompt,
            size=size or None,
            quality=quality or None,
        )
        logger.debug("POST %s/images/generations model=%s", self._base_url, model)
        response = self._request(
            "POST",
            f"{self._base_url}/images/generations",
            json=request.model_dump(exclude_none=True),
            headers={"Authorization": f"Bearer {self._api_key}"},
        )
        payload = self._parse(response, OpenAIImageResponse)

        if not payload.data:
            raise MissingImageDataError(self.name)

        first = payload.data[0]
        if first.b64_json:
            return self._decode_base64(first.b64_json)
        if first.url:
            return self._download(first.url)

        raise MissingImageDataError(self.name, "no b64_json or url in data[0]")

    def _download(self, url: str) -> bytes:
        """Fetch an image returned by reference."""
        logger.debug("Downloading generated image from %s", url)
        response = self._request("GET", url)
        if response.status_code >= 400:
            raise ProviderError(
                self.name,
                f"download failed with status {response.status_code}",
                status_code=response.status_code,
            )
        return response.content
