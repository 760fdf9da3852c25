"""Raw HTTP client returning the provider's JSON text."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from augmentor_chatgpt.client.parsers import decode_json, parse_model_list
from augmentor_chatgpt.config import ClientSettings
from augmentor_chatgpt.exceptions import ProviderRequestError
from augmentor_chatgpt.types import SdkVariant

logger = logging.getLogger(__name__)


class RawHttpClient:
    """Client that talks to the API over plain HTTP.

    Responses come back as JSON text and are decoded explicitly. Error
    responses carry their details in the body, so the body is returned
    whatever the HTTP status.
    """

    sdk = SdkVariant.ORHANERDAY

    def __init__(
        self,
        api_key: str | None,
        settings: ClientSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        if api_key and not api_key.isascii():
            # Header values must be ASCII; the provider rejects the call instead.
            logger.warning("API key contains non-ASCII characters; sending no key")
            api_key = None
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key or ''}".strip(),
        }
        if self.settings.organization:
            headers["OpenAI-Organization"] = self.settings.organization
        self._http = httpx.Client(
            base_url=self.settings.base_url.rstrip("/") + "/",
            headers=headers,
            timeout=self.settings.timeout,
            transport=transport,
        )

    def chat_text(self, options: dict[str, Any]) -> str:
        """Send a chat completion request and return the raw JSON text."""
        return self._send("POST", "chat/completions", json=options)

    def chat(self, options: dict[str, Any]) -> dict[str, Any]:
        """Make a chat completion request and decode the response."""
        return decode_json(self.chat_text(options))

    def list_models_text(self) -> str:
        return self._send("GET", "models")

    def list_models(self) -> dict[str, str]:
        try:
            raw = self.list_models_text()
        except ProviderRequestError as exc:
            logger.error("Failed to list models: %s", exc)
            return {}
        return parse_model_list(raw)

    def _send(self, method: str, path: str, **kwargs: Any) -> str:
        logger.debug("%s %s", method, path)
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise ProviderRequestError(
                f"Request timed out after {self.settings.timeout}s: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderRequestError(
                f"Failed to connect to {self.settings.base_url}: {exc}"
            ) from exc
        return response.text

    def close(self) -> None:
        """Close the client."""
        self._http.close()
