# src/profiles/store.py — v1
"""Locate style/character profiles by name or path and parse them.

Resolution order (first existing non-directory wins, duplicates skipped):
  1. The reference as given, relative to the current directory.
  2. The reference under each search root (with the default roots this
     adds the parent-directory ascent "../<input>").
  3. No extension: {root}/{kind}/{input}.yaml then .yml, for each root.
  4. Extension but no path separator: {root}/{kind}/{input}, for each root.

The default roots [".", ".."] let the tool run from the project root or
from a direct subdirectory of it.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Sequence
from pathlib import Path
from typing import cast

import yaml
from pydantic import ValidationError

from warhol.core.errors import ProfileNotFoundError, ProfileParseError
from warhol.profiles.models import (
    PROFILE_MODELS,
    CharacterProfile,
    ProfileKind,
    StyleProfile,
)

logger = logging.getLogger(__name__)

DEFAULT_ROOTS: tuple[Path, ...] = (Path("."), Path(".."))
_PROFILE_EXTENSIONS = (".yaml", ".yml")


class _ProfileLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as text; only null is resolved.

    Profile fields are prompt text, so `yes`, `1.10` or `2024-01-01` must
    reach the prompt exactly as written.
    """


_NULL_TAG = "tag:yaml.org,2002:null"
_ProfileLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class ProfileStore:
    """Resolve profile references against an explicit list of search roots."""

    def __init__(self, roots: Sequence[str | Path] | None = None) -> None:
        self._roots = [Path(r) for r in roots] if roots else list(DEFAULT_ROOTS)

    @property
    def roots(self) -> list[Path]:
        return list(self._roots)

    def candidates(self, kind: ProfileKind, reference: str) -> list[str]:
        """Return the ordered, de-duplicated candidate paths for a reference."""
        seen: set[str] = set()
        ordered: list[str] = []

        def add(path: str) -> None:
            if path not in seen:
                seen.add(path)
                ordered.append(path)

        add(_join(reference))
        for root in self._roots:
            add(_join(root, reference))

        if not _extension(reference):
            for root in self._roots:
                for suffix in _PROFILE_EXTENSIONS:
                    add(_join(root, kind, reference + suffix))
        elif not _has_separator(reference):
            for root in self._roots:
                add(_join(root, kind, reference))

        return ordered

    def locate(self, kind: ProfileKind, reference: str) -> str:
        """Return the first existing candidate file for a reference.

        Raises:
            ProfileNotFoundError: If no candidate exists.
            OSError: On filesystem errors other than "does not exist".
        """
        tried = self.candidates(kind, reference)
        for candidate in tried:
            if _is_file(candidate):
                return candidate
        raise ProfileNotFoundError(kind, reference, tried)

    def resolve(
        self, kind: ProfileKind, reference: str,
    ) -> tuple[StyleProfile | CharacterProfile, str]:
        """Locate and parse a profile.

        Args:
            kind: "styles" or "characters" (also the default directory name).
            reference: Profile name (e.g. "noir") or path to a YAML file.

        Returns:
            Tuple of (parsed profile, resolved path).

        Raises:
            ProfileNotFoundError: No candidate file exists.
            ProfileParseError: The file is not a valid profile document.
        """
        path = self.locate(kind, reference)
        profile = parse_profile(kind, path)
        logger.debug("Resolved %s %r -> %s", kind, reference, path)
        return profile, path

    def load_style(self, reference: str) -> tuple[StyleProfile, str]:
        profile, path = self.resolve("styles", reference)
        return cast(StyleProfile, profile), path

    def load_character(self, reference: str) -> tuple[CharacterProfile, str]:
        profile, path = self.resolve("characters", reference)
        return cast(CharacterProfile, profile), path


def parse_profile(kind: ProfileKind, path: str) -> StyleProfile | CharacterProfile:
    """Parse a YAML profile file; an empty name falls back to the file stem."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ProfileParseError(path, f"not valid UTF-8 ({exc.reason})") from exc

    try:
        data = yaml.load(text, Loader=_ProfileLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise ProfileParseError(path, str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ProfileParseError(
            path, f"expected a mapping, got {type(data).__name__}"
        )

    model_cls = PROFILE_MODELS[kind]
    try:
        profile = model_cls.model_validate(data)
    except ValidationError as exc:
        raise ProfileParseError(path, _summarize(exc)) from exc

    if not profile.name.strip():
        profile = profile.model_copy(update={"name": Path(path).stem})
    return profile  # type: ignore[return-value]


def _join(*parts: str | Path) -> str:
    return os.path.normpath(os.path.join(*[str(p) for p in parts]))


def _extension(reference: str) -> str:
    """Suffix from the last dot of the final element; ".noir" counts as one."""
    base = reference.replace(os.altsep or os.sep, os.sep).rsplit(os.sep, 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def _has_separator(reference: str) -> bool:
    if os.sep in reference:
        return True
    return bool(os.altsep) and os.altsep in reference


def _is_file(candidate: str) -> bool:
    try:
        return not stat.S_ISDIR(os.stat(candidate).st_mode)
    except (FileNotFoundError, NotADirectoryError):
        return False


def _summarize(exc: ValidationError) -> str:
    """Condense pydantic errors into 'field: message' pairs."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
