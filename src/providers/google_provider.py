# src/providers/google_provider.py — v1
"""Google Gemini adapter implementing BaseImageProvider.

REST call to POST {base}/models/{model}:generateContent?key=... (no SDK).
The image is the first inline base64 part among the response candidates.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from warhol.core.errors import MissingImageDataError
from warhol.providers.base_provider import BaseImageProvider
from warhol.providers.models import GeminiGenerateRequest, GeminiGenerateResponse

logger = logging.getLogger(__name__)


class GoogleImageProvider(BaseImageProvider):
    """Gemini image generation (gemini-*-image models)."""

    name = "google"
    default_model = "gemini-2.5-flash-image"
    credential_sources = ("GEMINI_API_KEY", "GOOGLE_API_KEY")
    base_url_setting = "gemini_base_url"

    def generate_image(
        self,
        model: str,
        prompt: str,
        size: str | None = None,
        quality: str | None = None,
    ) -> bytes:
        # size/quality are not part of the generateContent contract.
        request = GeminiGenerateRequest.from_prompt(prompt)
        endpoint = f"{self._base_url}/models/{quote(model, safe='')}:generateContent"
        logger.debug("POST %s", endpoint)
        response = self._request(
            "POST",
            endpoint,
            params={"key": self._api_key},
            json=request.model_dump(by_alias=True, exclude_none=True),
        )
        payload = self._parse(response, GeminiGenerateResponse)

        data = payload.first_image_data()
        if data is None:
            raise MissingImageDataError(self.name)
        return self._decode_base64(data)
