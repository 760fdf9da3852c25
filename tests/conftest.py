"""Shared test fixtures for augmentor-chatgpt."""

from __future__ import annotations

from typing import Any

import pytest

from augmentor_chatgpt.augmentor import ChatGptAugmentor
from augmentor_chatgpt.collaborators import StaticKeyProvider, StaticUser
from augmentor_chatgpt.config import AugmentorConfig, ClientSettings
from augmentor_chatgpt.types import SdkVariant


class FakeChatClient:
    """Chat client double recording requests and replaying a response."""

    def __init__(
        self,
        sdk: SdkVariant,
        api_key: str | None,
        response: dict[str, Any] | Exception | None = None,
        models: dict[str, str] | None = None,
    ) -> None:
        self.sdk = sdk
        self.api_key = api_key
        self.response = response if response is not None else {"choices": []}
        self.models = models or {}
        self.requests: list[dict[str, Any]] = []
        self.closed = False

    def chat(self, options: dict[str, Any]) -> dict[str, Any]:
        self.requests.append(options)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    def list_models(self) -> dict[str, str]:
        return dict(self.models)

    def close(self) -> None:
        self.closed = True


class RecordingFactory:
    """Client factory counting how many clients it builds."""

    def __init__(self, response: dict[str, Any] | Exception | None = None) -> None:
        self.response = response
        self.calls: list[tuple[SdkVariant, str | None, ClientSettings]] = []
        self.clients: list[FakeChatClient] = []

    def __call__(
        self, sdk: SdkVariant, api_key: str | None, settings: ClientSettings
    ) -> FakeChatClient:
        self.calls.append((sdk, api_key, settings))
        client = FakeChatClient(sdk, api_key, self.response)
        self.clients.append(client)
        return client

    @property
    def client(self) -> FakeChatClient:
        return self.clients[-1]


@pytest.fixture
def config_data() -> dict[str, Any]:
    """A complete stored configuration."""
    return {
        "sdk": "orhanerday",
        "model": "gpt-3.5-turbo",
        "messages": [
            {"role": "system", "content": "You are a helpful assistant."},
            {"role": "user", "content": "Summarize: {input}"},
        ],
        "temperature": "0.7",
        "max_tokens": "100",
        "top_p": "1",
        "n": "1",
        "frequency_penalty": "0",
        "presence_penalty": "0",
        "user_tracking": False,
    }


@pytest.fixture
def chat_response() -> dict[str, Any]:
    """A successful chat completion body."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "A short summary."},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


@pytest.fixture
def make_augmentor(config_data):
    """Build an augmentor wired to a recording client factory."""

    def _make(
        response: dict[str, Any] | Exception | None = None,
        **overrides: Any,
    ) -> tuple[ChatGptAugmentor, RecordingFactory]:
        factory = RecordingFactory(response)
        data = {**config_data, **overrides}
        augmentor = ChatGptAugmentor(
            config=AugmentorConfig(**data),
            key_provider=StaticKeyProvider("test-key"),
            current_user=StaticUser(42),
            client_factory=factory,
        )
        return augmentor, factory

    return _make


@pytest.fixture
def factory() -> RecordingFactory:
    """A client factory that records every client it builds."""
    return RecordingFactory()
