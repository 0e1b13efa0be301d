# src/core/errors.py — v1
"""Error taxonomy shared by profile loading, provider dispatch and generation.

Every failure raised by warhol derives from WarholError so the CLI can map
it to a non-zero exit code in one place.
"""

from __future__ import annotations


class WarholError(Exception):
    """Base class for all warhol failures."""


# === PROFILES ===


class ProfileNotFoundError(WarholError):
    """Raised when no candidate path exists for a profile reference."""

    def __init__(self, kind: str, reference: str, candidates: list[str]) -> None:
        self.kind = kind
        self.reference = reference
        self.candidates = candidates
        super().__init__(
            f"{kind} profile not found: {reference!r} "
            f"(tried: {', '.join(candidates)})"
        )


class ProfileParseError(WarholError):
    """Raised when a profile file cannot be parsed into its schema."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"parse {path}: {detail}")


class TemplateExistsError(WarholError):
    """Raised when a profile template would overwrite an existing file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"file already exists: {path}")


# === PROVIDERS ===


class UnsupportedProviderError(WarholError, ValueError):
    """Raised when a provider id is not one of the known variants."""

    def __init__(self, provider: str, available: list[str]) -> None:
        self.provider = provider
        super().__init__(
            f"unsupported provider {provider!r} "
            f"(expected {' or '.join(available)})"
        )


class MissingCredentialError(WarholError):
    """Raised when none of a provider's credential sources is set."""

    def __init__(self, provider: str, sources: list[str]) -> None:
        self.provider = provider
        self.sources = sources
        if len(sources) > 1:
            names = f"{sources[0]} (or {', '.join(sources[1:])})"
        else:
            names = sources[0]
        super().__init__(f"{names} is required for provider {provider!r}")


class ProviderError(WarholError):
    """Provider-side rejection or undecodable provider response."""

    def __init__(
        self, provider: str, message: str, status_code: int | None = None,
    ) -> None:
        self.provider = provider
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider} error: {message}")


class MissingImageDataError(WarholError):
    """Raised when a successful response carries no usable image payload."""

    def __init__(self, provider: str, detail: str = "") -> None:
        self.provider = provider
        msg = f"{provider} response did not include image data"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ProviderTransportError(WarholError):
    """Network-level failure (timeout, connection refused, TLS)."""

    def __init__(self, provider: str, detail: str) -> None:
        self.provider = provider
        super().__init__(f"{provider} request failed: {detail}")


# === ARTIFACTS ===


class ArtifactWriteError(WarholError, OSError):
    """Filesystem failure creating the output directory or writing outputs."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"failed to write {path}: {detail}")
