# src/providers/base_provider.py — v1
"""Abstract image provider: one synchronous request in, image bytes out.

Subclasses own their wire schema; this base owns the HTTP session, the
fixed timeout and the shared error classification.
"""

from __future__ import annotations

import base64
import binascii
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from warhol.core.errors import ProviderError, ProviderTransportError
from warhol.providers.models import ErrorBody

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 180.0

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseImageProvider(ABC):
    """Unified interface for image-generation providers."""

    # Identity and capabilities, known before any instance exists.
    name: ClassVar[str]
    default_model: ClassVar[str]
    credential_sources: ClassVar[tuple[str, ...]]
    base_url_setting: ClassVar[str]
    supports_size_quality: ClassVar[bool] = False

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.strip().rstrip("/")
        self._client = httpx.Client(timeout=timeout, transport=transport)

    @abstractmethod
    def generate_image(
        self,
        model: str,
        prompt: str,
        size: str | None = None,
        quality: str | None = None,
    ) -> bytes:
        """Generate one image and return its raw bytes."""

    @property
    def provider_name(self) -> str:
        """Provider identifier (google, openai)."""
        return self.name

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseImageProvider:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- HTTP helpers ---

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Issue one request; network failures become ProviderTransportError."""
        try:
            return self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise ProviderTransportError(self.name, f"timed out ({exc})") from exc
        except httpx.HTTPError as exc:
            raise ProviderTransportError(self.name, str(exc)) from exc

    def _parse(self, response: httpx.Response, schema: type[ResponseT]) -> ResponseT:
        """Classify the status code and decode the body into `schema`.

        Raises:
            ProviderError: Status >= 400 (with the provider's own message when
                present) or a body that does not match the schema.
        """
        try:
            body = response.json()
        except ValueError:
            body = None

        if response.status_code >= 400:
            message = _error_message(body)
            if not message:
                message = f"request failed with status {response.status_code}"
            raise ProviderError(self.name, message, status_code=response.status_code)

        if body is None:
            raise ProviderError(
                self.name, "decode response: body is not JSON",
                status_code=response.status_code,
            )

        try:
            return schema.model_validate(body)
        except ValidationError as exc:
            raise ProviderError(
                self.name, f"decode response: {exc.error_count()} schema error(s)",
                status_code=response.status_code,
            ) from exc

    def _decode_base64(self, data: str) -> bytes:
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ProviderError(self.name, f"decode image bytes: {exc}") from exc


def _error_message(body: object) -> str | None:
    """Extract {"error": {"message": ...}} from a decoded body, if present."""
    if not isinstance(body, dict):
        return None
    try:
        error = ErrorBody.model_validate(body.get("error") or {})
    except ValidationError:
        return None
    if error.message and error.message.strip():
        return error.message.strip()
    return None
