"""Exception hierarchy for augmentor-chatgpt."""

from __future__ import annotations


class AugmentorError(Exception):
    """Base exception for all augmentor-chatgpt errors."""


class ConfigError(AugmentorError):
    """Error loading or validating an augmentor configuration."""


class ClientError(AugmentorError):
    """Error selecting or building an API client."""


class ProviderRequestError(AugmentorError):
    """Error while calling the provider API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseDecodeError(AugmentorError):
    """Provider response could not be decoded into a JSON object."""
