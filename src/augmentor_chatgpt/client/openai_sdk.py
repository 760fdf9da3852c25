"""Client built on the official OpenAI SDK."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    OpenAI,
    OpenAIError,
)

from augmentor_chatgpt.client.parsers import models_from_entries
from augmentor_chatgpt.config import ClientSettings
from augmentor_chatgpt.exceptions import ProviderRequestError, ResponseDecodeError
from augmentor_chatgpt.types import SdkVariant

logger = logging.getLogger(__name__)


class OpenAISDKClient:
    """Client for the OpenAI API using the ``openai`` package.

    The SDK returns structured response objects; they are dumped to plain
    mappings so callers see the same shape as the raw HTTP client.
    """

    sdk = SdkVariant.OPENAI_PHP

    def __init__(
        self,
        api_key: str | None,
        settings: ClientSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        # A placeholder key defers the authentication failure to the first call.
        self._client = OpenAI(
            api_key=api_key or "EMPTY",
            base_url=self.settings.base_url,
            organization=self.settings.organization,
            timeout=self.settings.timeout,
            http_client=http_client,
        )

    def chat(self, options: dict[str, Any]) -> dict[str, Any]:
        """Make a chat completion request."""
        try:
            response = self._client.chat.completions.create(**options)
        except APITimeoutError as exc:
            raise ProviderRequestError(
                f"Request timed out after {self.settings.timeout}s: {exc}"
            ) from exc
        except APIConnectionError as exc:
            raise ProviderRequestError(
                f"Failed to connect to {self.settings.base_url}: {exc}"
            ) from exc
        except APIStatusError as exc:
            raise ProviderRequestError(
                f"API returned {exc.status_code}: {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except OpenAIError as exc:
            raise ProviderRequestError(
                f"Request failed: {type(exc).__name__}: {exc}"
            ) from exc
        except (ValueError, TypeError, AttributeError) as exc:
            raise ResponseDecodeError(f"Unreadable chat response: {exc}") from exc

        return response.model_dump()

    def list_models(self) -> dict[str, str]:
        try:
            page = self._client.models.list()
        except OpenAIError as exc:
            logger.error("Failed to list models: %s", exc)
            return {}
        except (ValueError, TypeError, AttributeError) as exc:
            logger.error("Unexpected API response format: %s", exc)
            return {}

        entries = getattr(page, "data", None)
        if not isinstance(entries, list):
            logger.error("Unexpected API response format.")
            return {}
        return models_from_entries(entries)

    def close(self) -> None:
        """Close the client."""
        self._client.close()
