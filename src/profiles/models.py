# src/profiles/models.py — v1
"""Typed style and character profiles parsed from YAML files."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# A profile kind doubles as the default directory its files live in.
ProfileKind = Literal["styles", "characters"]


class _Profile(BaseModel):
    """Common base: frozen, unknown YAML keys ignored, nulls read as empty."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    name: str = ""
    description: str = ""

    @field_validator("name", "description", mode="before")
    @classmethod
    def _none_as_empty(cls, v: object) -> object:
        return "" if v is None else v


class StyleProfile(_Profile):
    """Visual identity shared by every image generated with it."""

    prompt_prefix: tuple[str, ...] = Field(default_factory=tuple)
    negative_prompt: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("prompt_prefix", "negative_prompt", mode="before")
    @classmethod
    def _none_as_empty_list(cls, v: object) -> object:
        return _text_items(v)


class CharacterProfile(_Profile):
    """Recurring subject. A non-empty `prompt` replaces the structured fields."""

    traits: tuple[str, ...] = Field(default_factory=tuple)
    outfit: tuple[str, ...] = Field(default_factory=tuple)
    prompt: str = ""

    @field_validator("traits", "outfit", mode="before")
    @classmethod
    def _none_as_empty_list(cls, v: object) -> object:
        return _text_items(v)

    @field_validator("prompt", mode="before")
    @classmethod
    def _none_prompt(cls, v: object) -> object:
        return "" if v is None else v


PROFILE_MODELS: dict[str, type[_Profile]] = {
    "styles": StyleProfile,
    "characters": CharacterProfile,
}


def _text_items(v: object) -> object:
    """A null list reads as empty; a null item reads as ""."""
    if v is None:
        return ()
    if isinstance(v, (list, tuple)):
        return ["" if item is None else item for item in v]
    return v
