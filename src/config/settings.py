# src/config/settings.py — v1
"""Typed configuration loaded from environment / .env via pydantic-settings.

Single source of truth for deployment-specific settings: provider endpoints,
default output locations, generation defaults and logging.
Credentials are not stored here; see providers/credentials.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === PROVIDERS ===
    default_provider: str = "google"
    openai_base_url: str = "https://api.openai.com/v1"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    request_timeout_seconds: float = 180.0

    # OpenAI-only generation parameters
    openai_image_size: str = "1024x1024"
    openai_image_quality: str = "medium"

    # === Workspace ===
    output_dir: Path = Path("outputs")
    profile_roots: str = ".,.."

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: str = ""
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("openai_base_url", "gemini_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:  # noqa: N805
        """Endpoints are joined with '/...' so drop trailing slashes."""
        return v.strip().rstrip("/")

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.request_timeout_seconds <= 0:
            errors.append("REQUEST_TIMEOUT_SECONDS must be > 0")

        if not self.profile_roots_list:
            errors.append("PROFILE_ROOTS must list at least one directory")

        if not self.openai_base_url or not self.gemini_base_url:
            errors.append("Provider base URLs must not be empty")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def profile_roots_list(self) -> list[Path]:
        """Parse comma-separated profile search roots."""
        return [Path(r.strip()) for r in self.profile_roots.split(",") if r.strip()]


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or CLI flags).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
