# src/providers/provider_factory.py — v1
"""Factory: resolve model ids and instantiate a provider from its id.

The provider set is closed: exactly the variants in _PROVIDER_REGISTRY.
Model resolution validates the provider id before any credential lookup
or network activity.
"""

from __future__ import annotations

import logging

import httpx

from warhol.config.settings import Settings
from warhol.core.errors import UnsupportedProviderError
from warhol.providers.base_provider import BaseImageProvider
from warhol.providers.credentials import CredentialSource, EnvironmentCredentials
from warhol.providers.google_provider import GoogleImageProvider
from warhol.providers.openai_provider import OpenAIImageProvider

logger = logging.getLogger(__name__)

_PROVIDER_REGISTRY: dict[str, type[BaseImageProvider]] = {
    GoogleImageProvider.name: GoogleImageProvider,
    OpenAIImageProvider.name: OpenAIImageProvider,
}


def available_providers() -> list[str]:
    """Known provider ids, in registry order."""
    return list(_PROVIDER_REGISTRY)


def provider_class(provider: str) -> type[BaseImageProvider]:
    """Look up a provider class by id (case-insensitive).

    Raises:
        UnsupportedProviderError: If the id is not a known variant.
    """
    key = normalize_provider_id(provider)
    cls = _PROVIDER_REGISTRY.get(key)
    if cls is None:
        raise UnsupportedProviderError(provider, available_providers())
    return cls


def normalize_provider_id(provider: str) -> str:
    return provider.strip().lower()


def resolve_model(provider: str, override: str | None = None) -> str:
    """Return the explicit model override, or the provider's default model.

    Raises:
        UnsupportedProviderError: If the provider is unknown, with or
            without an override.
    """
    cls = provider_class(provider)
    if override and override.strip():
        return override.strip()
    return cls.default_model


def supports_size_quality(provider: str) -> bool:
    """Whether the provider accepts size/quality generation parameters."""
    return provider_class(provider).supports_size_quality


def create_provider(
    provider: str,
    credentials: CredentialSource | None = None,
    settings: Settings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> BaseImageProvider:
    """Instantiate the adapter for `provider` with a resolved credential.

    Args:
        provider: Provider id (google, openai).
        credentials: Credential lookup; the process environment by default.
        settings: Application settings (base URLs, timeout).
        transport: Optional httpx transport (tests inject a MockTransport).

    Returns:
        Configured BaseImageProvider instance.

    Raises:
        UnsupportedProviderError: If the provider is unknown.
        MissingCredentialError: If none of the provider's key sources is set.
    """
    cls = provider_class(provider)
    settings = settings or Settings()
    credentials = credentials or EnvironmentCredentials()

    api_key = credentials.require(cls.name, cls.credential_sources)
    base_url = getattr(settings, cls.base_url_setting)

    logger.debug("Creating image provider: provider=%s, base_url=%s", cls.name, base_url)
    return cls(
        api_key=api_key,
        base_url=base_url,
        timeout=settings.request_timeout_seconds,
        transport=transport,
    )
