"""Decoding of provider responses."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping

from augmentor_chatgpt.exceptions import ResponseDecodeError
from augmentor_chatgpt.types import ChatCompletion, ProviderFailure

logger = logging.getLogger(__name__)


def decode_json(raw: str | bytes) -> dict[str, Any]:
    """Decode a JSON response body that must hold an object."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as exc:
        raise ResponseDecodeError(f"Response is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ResponseDecodeError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    return data


def _error_message(error: Any) -> str:
    if isinstance(error, Mapping):
        message = error.get("message")
        if message:
            return str(message)
    return str(error)


def parse_chat_response(data: Mapping[str, Any]) -> ChatCompletion | ProviderFailure:
    """Extract generated texts, or the provider's error, from a chat response.

    Choices without a message are skipped. Texts are returned as produced;
    cleanup is left to the caller.
    """
    if "_errors" in data:
        return ProviderFailure(_error_message(data["_errors"]))
    if data.get("error"):
        return ProviderFailure(_error_message(data["error"]))

    choices = data.get("choices")
    if not isinstance(choices, list):
        return ProviderFailure("Response has no choices")

    contents: list[str] = []
    for choice in choices:
        if not isinstance(choice, Mapping):
            continue
        message = choice.get("message")
        if not message:
            continue
        if not isinstance(message, Mapping):
            return ProviderFailure(f"Malformed choice message: {message!r}")
        contents.append(message.get("content") or "")

    return ChatCompletion(contents=contents)


def models_from_entries(entries: Iterable[Any]) -> dict[str, str]:
    """Map model ids to themselves, ignoring entries without an id."""
    models: dict[str, str] = {}
    for entry in entries:
        if isinstance(entry, Mapping):
            model_id = entry.get("id")
        else:
            model_id = getattr(entry, "id", None)
        if model_id:
            models[str(model_id)] = str(model_id)
    return models


def parse_model_list(raw: str | bytes) -> dict[str, str]:
    """Decode a JSON model listing into a mapping of id to id.

    Returns an empty mapping when the body does not have the expected shape.
    """
    try:
        data = decode_json(raw)
    except ResponseDecodeError as exc:
        logger.error("Unexpected API response format: %s", exc)
        return {}

    entries = data.get("data")
    if not isinstance(entries, list):
        logger.error("Unexpected API response format.")
        return {}

    return models_from_entries(entries)
