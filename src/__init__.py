"""warhol: consistent-style image generation from style and character profiles."""

from warhol.version import __version__

__all__ = ["__version__"]
