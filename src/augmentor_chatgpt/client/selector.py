"""Lazy selection of the configured chat client."""

from __future__ import annotations

import logging
from typing import Callable

from augmentor_chatgpt.client.factory import build_client
from augmentor_chatgpt.client.protocol import ChatClient
from augmentor_chatgpt.collaborators import KeyProvider
from augmentor_chatgpt.config import ClientSettings
from augmentor_chatgpt.types import SdkVariant

logger = logging.getLogger(__name__)

ClientFactory = Callable[[SdkVariant, str | None, ClientSettings], ChatClient]


class ClientSelector:
    """Builds the configured client on first use and keeps it.

    Not thread-safe: a selector belongs to a single request scope.
    """

    def __init__(
        self,
        sdk: SdkVariant | str | None,
        key_provider: KeyProvider,
        settings: ClientSettings | None = None,
        factory: ClientFactory = build_client,
    ) -> None:
        self.sdk = SdkVariant.resolve(sdk)
        self.key_provider = key_provider
        self.settings = settings or ClientSettings()
        self._factory = factory
        self._client: ChatClient | None = None

    def get_client(self) -> ChatClient:
        """Get the API client, building it if needed."""
        if self._client is None:
            api_key = self.key_provider.get_key_value()
            self._client = self._factory(self.sdk, api_key, self.settings)
        return self._client

    def list_models(self) -> dict[str, str]:
        """Available models as a mapping of id to id.

        Gives an empty mapping, and logs, when the client cannot be built.
        """
        try:
            client = self.get_client()
        except Exception as exc:
            logger.error("Failed to build %s client: %s", self.sdk.value, exc)
            return {}
        return client.list_models()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
