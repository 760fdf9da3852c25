"""ChatGptAugmentor - turns a templated conversation into generated text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from augmentor_chatgpt.client.factory import build_client
from augmentor_chatgpt.client.parsers import parse_chat_response
from augmentor_chatgpt.client.protocol import ChatClient
from augmentor_chatgpt.client.selector import ClientFactory, ClientSelector
from augmentor_chatgpt.coercion import to_bool, to_float, to_int
from augmentor_chatgpt.collaborators import (
    AnonymousUser,
    CurrentUserProvider,
    EnvKeyProvider,
    KeyProvider,
    TextNormalizer,
    WhitespaceNormalizer,
)
from augmentor_chatgpt.config import AugmentorConfig
from augmentor_chatgpt.types import (
    AugmentorResult,
    ChatCompletion,
    ChatMessage,
    ProviderFailure,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = (
    "Error during the chat completion execution, "
    "please check the logs for more information."
)


def build_messages(
    templates: list[Any] | None, input_text: str
) -> list[ChatMessage]:
    """Render message templates in order, skipping empty entries."""
    messages: list[ChatMessage] = []
    for template in templates or []:
        if not template:
            continue
        if isinstance(template, ChatMessage):
            message = template
        elif isinstance(template, Mapping):
            content = template.get("content")
            message = ChatMessage(
                role=str(template.get("role") or ""),
                content="" if content is None else str(content),
            )
        else:
            continue
        messages.append(message.render(input_text))
    return messages


@dataclass
class ChatGptAugmentor:
    """Chat completion augmentor.

    Given a chat conversation, the model returns a chat completion. The
    stored message templates are rendered with the runtime input, sent in
    order, and every generated choice is returned.
    """

    config: AugmentorConfig
    key_provider: KeyProvider = field(default_factory=EnvKeyProvider)
    current_user: CurrentUserProvider = field(default_factory=AnonymousUser)
    normalizer: TextNormalizer = field(default_factory=WhitespaceNormalizer)
    logger: logging.Logger = field(default=logger, repr=False)
    client_factory: ClientFactory = field(default=build_client, repr=False)
    _selector: ClientSelector = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._selector = ClientSelector(
            self.config.sdk_variant,
            self.key_provider,
            self.config.client,
            factory=self.client_factory,
        )

    @classmethod
    def from_mapping(
        cls, configuration: Mapping[str, Any], **kwargs: Any
    ) -> ChatGptAugmentor:
        """Create an augmentor from a plain configuration mapping."""
        return cls(config=AugmentorConfig(**configuration), **kwargs)

    def get_client(self) -> ChatClient:
        """Get the API client for the configured SDK."""
        return self._selector.get_client()

    def list_models(self) -> dict[str, str]:
        """Available models as a mapping of id to id."""
        return self._selector.list_models()

    def build_options(self, input_text: str) -> dict[str, Any]:
        """Assemble the chat completion request for an input."""
        config = self.config
        options: dict[str, Any] = {
            "model": config.model,
            "messages": [
                message.to_openai_format()
                for message in build_messages(config.messages, input_text)
            ],
            "temperature": to_float(config.temperature),
            "max_tokens": to_int(config.max_tokens),
            "top_p": to_float(config.top_p),
            "n": to_int(config.n),
            "frequency_penalty": to_float(config.frequency_penalty),
            "presence_penalty": to_float(config.presence_penalty),
        }

        if to_bool(config.user_tracking):
            options["user"] = str(self.current_user.id())

        return options

    def run(self, input_text: str) -> AugmentorResult:
        """Execute and return the typed result."""
        try:
            outcome = self._complete(self.build_options(input_text))
        except Exception as exc:
            self.logger.error("OpenAI API error: %s.", exc)
            return AugmentorResult.failure(GENERIC_ERROR_MESSAGE)

        if isinstance(outcome, ProviderFailure):
            self.logger.error("OpenAI API error: %s.", outcome.message)
            return AugmentorResult.failure(GENERIC_ERROR_MESSAGE)

        return AugmentorResult.success(outcome.contents)

    def execute(self, input_text: str) -> dict[str, Any]:
        """Create a completion for the input.

        Args:
            input_text: The text substituted into the user messages.

        Returns:
            ``{"default": [texts...]}`` on success, or ``{"_errors": message}``
            with a generic message. Provider error details are only logged.
        """
        return self.run(input_text).to_dict()

    def _complete(self, options: dict[str, Any]) -> ChatCompletion | ProviderFailure:
        self.logger.debug(
            "Requesting chat completion: model=%s messages=%d",
            options["model"],
            len(options["messages"]),
        )
        response = self.get_client().chat(options)
        outcome = parse_chat_response(response)
        if isinstance(outcome, ProviderFailure):
            return outcome
        return ChatCompletion(
            contents=[self.normalizer.normalize_text(text) for text in outcome.contents]
        )

    def close(self) -> None:
        self._selector.close()
