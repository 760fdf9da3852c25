"""Client factory helpers."""

from __future__ import annotations

import logging

from augmentor_chatgpt.client.openai_sdk import OpenAISDKClient
from augmentor_chatgpt.client.protocol import ChatClient
from augmentor_chatgpt.client.raw import RawHttpClient
from augmentor_chatgpt.config import ClientSettings
from augmentor_chatgpt.exceptions import ClientError
from augmentor_chatgpt.types import SdkVariant

logger = logging.getLogger(__name__)


def build_client(
    sdk: SdkVariant | str | None,
    api_key: str | None,
    settings: ClientSettings | None = None,
) -> ChatClient:
    """Build the chat client for an SDK variant."""
    try:
        variant = SdkVariant.resolve(sdk)
    except ValueError as exc:
        raise ClientError(f"Unknown SDK: {sdk!r}") from exc

    logger.debug("Building %s client", variant.value)
    if variant is SdkVariant.ORHANERDAY:
        return RawHttpClient(api_key, settings)
    return OpenAISDKClient(api_key, settings)
