"""Collaborators the augmentor depends on: secrets, users, text cleanup."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


# =============================================================================
# API keys
# =============================================================================


class KeyProvider(Protocol):
    """Supplies the provider API key."""

    def get_key_value(self) -> str | None:
        """Return the API key, or None when none is configured."""
        ...


class StaticKeyProvider:
    """Key provider holding a fixed key."""

    def __init__(self, key: str | None) -> None:
        self._key = key

    def get_key_value(self) -> str | None:
        return self._key


class EnvKeyProvider:
    """Key provider reading an environment variable."""

    def __init__(self, variable: str = "OPENAI_API_KEY") -> None:
        self.variable = variable

    def get_key_value(self) -> str | None:
        return os.environ.get(self.variable) or None


class FileKeyProvider:
    """Key provider reading a key file; surrounding whitespace is ignored."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_key_value(self) -> str | None:
        try:
            key = self.path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            logger.warning("Could not read key file %s: %s", self.path, exc)
            return None
        return key or None


# =============================================================================
# Current user
# =============================================================================


class CurrentUserProvider(Protocol):
    """Identifies the end user on whose behalf a request is made."""

    def id(self) -> int | str:
        ...


class StaticUser:
    """A fixed end-user identifier."""

    def __init__(self, user_id: int | str) -> None:
        self._user_id = user_id

    def id(self) -> int | str:
        return self._user_id


class AnonymousUser:
    """The anonymous user, identified as 0."""

    def id(self) -> int:
        return 0


# =============================================================================
# Text normalization
# =============================================================================


class TextNormalizer(Protocol):
    """Cleans up generated text before it is returned."""

    def normalize_text(self, text: str) -> str:
        ...


_TRAILING_SPACE = re.compile(r"[ \t]+$", re.MULTILINE)
_BLANK_RUNS = re.compile(r"\n{3,}")


class WhitespaceNormalizer:
    """Strips surrounding and trailing whitespace, collapses blank-line runs."""

    def normalize_text(self, text: str) -> str:
        text = text.replace("\r\n", "\n")
        text = _TRAILING_SPACE.sub("", text)
        text = _BLANK_RUNS.sub("\n\n", text)
        return text.strip()
