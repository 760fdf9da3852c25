"""Core data types for augmentor-chatgpt."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

Role = Literal["system", "assistant", "user"]

INPUT_PLACEHOLDER = "{input}"


# =============================================================================
# SDK selection
# =============================================================================


class SdkVariant(str, Enum):
    """Client implementation used to reach the chat-completion API."""

    ORHANERDAY = "orhanerday"
    OPENAI_PHP = "openai_php"

    @classmethod
    def _missing_(cls, value: object) -> SdkVariant | None:
        if value == "openai":
            return cls.OPENAI_PHP
        return None

    @classmethod
    def resolve(cls, value: str | SdkVariant | None) -> SdkVariant:
        """Resolve a configured SDK name.

        None and the empty string both select the raw HTTP client, so a
        cleared setting behaves like one that was never saved.
        """
        if value is None or value == "":
            return cls.ORHANERDAY
        return cls(value)


# =============================================================================
# Messages
# =============================================================================


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """A single message of the conversation sent to the provider."""

    role: str
    content: str

    def render(self, input_text: str) -> ChatMessage:
        """Substitute the runtime input into a user message.

        Every occurrence of the placeholder is replaced; other roles are
        returned untouched.
        """
        if self.role != "user":
            return self
        return ChatMessage(
            role=self.role,
            content=self.content.replace(INPUT_PLACEHOLDER, input_text),
        )

    def to_openai_format(self) -> dict[str, Any]:
        """Convert to OpenAI API message format."""
        return {"role": self.role, "content": self.content}


# =============================================================================
# Provider outcomes
# =============================================================================


@dataclass(frozen=True, slots=True)
class ChatCompletion:
    """Generated texts extracted from a successful chat response."""

    contents: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ProviderFailure:
    """A failure reported by the provider or found while reading its response."""

    message: str


# =============================================================================
# Results
# =============================================================================


@dataclass(frozen=True)
class AugmentorResult:
    """Output of one augmentor execution.

    Exactly one of ``default`` and ``errors`` is set.
    """

    default: list[str] | None = None
    errors: str | None = None

    def __post_init__(self) -> None:
        if (self.default is None) == (self.errors is None):
            raise ValueError("AugmentorResult needs exactly one of default or errors")

    @classmethod
    def success(cls, texts: list[str]) -> AugmentorResult:
        return cls(default=list(texts))

    @classmethod
    def failure(cls, message: str) -> AugmentorResult:
        return cls(errors=message)

    @property
    def is_error(self) -> bool:
        return self.errors is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``{"default": [...]}`` / ``{"_errors": ...}`` mapping."""
        if self.errors is not None:
            return {"_errors": self.errors}
        return {"default": list(self.default or [])}
