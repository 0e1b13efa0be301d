# src/providers/credentials.py — v1
"""Credential lookup with an explicit precedence list of named sources.

Providers never read the process environment directly: they receive a
CredentialSource, which makes dispatch testable with a plain dict.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from warhol.core.errors import MissingCredentialError


class CredentialSource(ABC):
    """Read-only lookup of named secrets."""

    @abstractmethod
    def get(self, name: str) -> str | None:
        """Return the raw value for `name`, or None when unset."""

    def first(self, names: Sequence[str]) -> str | None:
        """Return the first non-blank value in precedence order, trimmed."""
        for name in names:
            value = self.get(name)
            if value and value.strip():
                return value.strip()
        return None

    def require(self, provider: str, names: Sequence[str]) -> str:
        """Like first(), but a missing credential is an error.

        Raises:
            MissingCredentialError: If none of `names` is set.
        """
        value = self.first(names)
        if value is None:
            raise MissingCredentialError(provider, list(names))
        return value


class EnvironmentCredentials(CredentialSource):
    """Credentials backed by a mapping, the process environment by default."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> str | None:
        return self._environ.get(name)
