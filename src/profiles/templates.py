# src/profiles/templates.py — v1
"""Starter YAML templates for new style and character profiles.

Templates never overwrite an existing file. Extra style keys (palette,
camera, seed_policy) are notes for the author and are ignored on load.
"""

from __future__ import annotations

import logging
from pathlib import Path

from warhol.core.errors import ArtifactWriteError, TemplateExistsError
from warhol.profiles.models import ProfileKind

logger = logging.getLogger(__name__)

_STYLE_TEMPLATE = """\
# warhol style profile
name: {name}
description: "Short description of the intended visual identity."

prompt_prefix:
  - "Define the core visual style in plain language."

palette:
  - "#111111"
  - "#f4f4f4"

camera:
  lens: "35mm"
  framing: "medium shot"
  lighting: "soft directional light"

negative_prompt:
  - "avoid brand marks"
  - "avoid unrelated text"

seed_policy:
  mode: "fixed" # fixed | random
  seed: 42
"""

_CHARACTER_TEMPLATE = """\
# warhol character profile
name: {name}
description: "Short character description."

traits:
  - "age range"
  - "hair style and color"

outfit:
  - "top clothing"
  - "bottom clothing"
  - "footwear"

prompt: ""
"""

TEMPLATES: dict[str, str] = {
    "styles": _STYLE_TEMPLATE,
    "characters": _CHARACTER_TEMPLATE,
}


def render_template(kind: ProfileKind, name: str) -> str:
    """Return the template text for a profile kind with `name` filled in."""
    return TEMPLATES[kind].format(name=name)


def write_template(kind: ProfileKind, name: str, path: str | Path) -> Path:
    """Write a new profile template, creating parent directories.

    Raises:
        TemplateExistsError: If `path` already exists.
        ArtifactWriteError: If the directory or file cannot be written.
    """
    target = Path(path)
    if target.exists():
        raise TemplateExistsError(str(target))

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        # exclusive create
        with target.open("x", encoding="utf-8") as fh:
            fh.write(render_template(kind, name))
    except FileExistsError as exc:
        raise TemplateExistsError(str(target)) from exc
    except OSError as exc:
        raise ArtifactWriteError(str(target), exc.strerror or str(exc)) from exc

    logger.info("Created %s template %s", kind, target)
    return target
