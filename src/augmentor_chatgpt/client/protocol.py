"""Chat client protocol definition."""

from __future__ import annotations

from typing import Any, Protocol

from augmentor_chatgpt.types import SdkVariant


class ChatClient(Protocol):
    """Protocol for chat-completion API clients.

    Both implementations hand back the decoded response mapping, whatever
    shape their transport produces.
    """

    sdk: SdkVariant

    def chat(self, options: dict[str, Any]) -> dict[str, Any]:
        """Make a chat completion request.

        Args:
            options: Request body (model, messages and sampling parameters).

        Returns:
            The decoded provider response.

        Raises:
            ProviderRequestError: If the request could not be made.
            ResponseDecodeError: If the response is not a JSON object.
        """
        ...

    def list_models(self) -> dict[str, str]:
        """Return available models as a mapping of id to id.

        Never raises; an unreadable response gives an empty mapping.
        """
        ...

    def close(self) -> None:
        """Close any open connections."""
        ...
