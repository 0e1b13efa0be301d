# src/prompting/composer.py — v1
"""Compose the final provider prompt from style, character and user text.

Fragment order:
  1. style description
  2. style prompt_prefix fragments, in file order
  3. character: `prompt` alone when set, else description,
     "Traits: a, b" and "Outfit: c, d"
  4. the user prompt
  5. "Avoid: x, y" from the style negative_prompt

Each fragment is trimmed, empty fragments are dropped, and the survivors
are joined with ". ". The function is pure.
"""

from __future__ import annotations

from collections.abc import Iterable

from warhol.profiles.models import CharacterProfile, StyleProfile

FRAGMENT_SEPARATOR = ". "
LIST_SEPARATOR = ", "


def compose_prompt(
    style: StyleProfile,
    character: CharacterProfile | None,
    prompt: str,
) -> str:
    """Build the final prompt string sent to the image provider."""
    parts: list[str] = [style.description]
    parts.extend(style.prompt_prefix)

    if character is not None:
        parts.extend(character_fragments(character))

    parts.append(prompt)

    if style.negative_prompt:
        parts.append("Avoid: " + LIST_SEPARATOR.join(style.negative_prompt))

    return FRAGMENT_SEPARATOR.join(_non_empty(parts))


def character_fragments(character: CharacterProfile) -> list[str]:
    """Character contribution: the override prompt, or the structured fields."""
    if character.prompt.strip():
        return [character.prompt]

    fragments = [character.description]
    if character.traits:
        fragments.append("Traits: " + LIST_SEPARATOR.join(character.traits))
    if character.outfit:
        fragments.append("Outfit: " + LIST_SEPARATOR.join(character.outfit))
    return fragments


def _non_empty(values: Iterable[str]) -> list[str]:
    return [v.strip() for v in values if v and v.strip()]
