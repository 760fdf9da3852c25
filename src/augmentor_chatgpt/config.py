"""Configuration models and loading."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, field_validator

from augmentor_chatgpt.exceptions import ConfigError
from augmentor_chatgpt.types import INPUT_PLACEHOLDER, SdkVariant

DEFAULT_ENGINE = "gpt-3.5-turbo"

SUPPORTED_MODELS = {
    "gpt-3.5-turbo": "gpt-3.5-turbo",
    "gpt-3.5-turbo-0301": "gpt-3.5-turbo-0301",
}

MESSAGE_ROLES = {
    "system": "System",
    "assistant": "Assistant",
    "user": "User",
}

SAMPLING_FIELDS = (
    "temperature",
    "max_tokens",
    "top_p",
    "n",
    "frequency_penalty",
    "presence_penalty",
    "user_tracking",
)

# Values an editor starts from when a field has never been set.
FORM_DEFAULTS: dict[str, Any] = {
    "sdk": SdkVariant.ORHANERDAY.value,
    "model": DEFAULT_ENGINE,
    "messages": [{"role": "user", "content": INPUT_PLACEHOLDER}],
    "temperature": 1,
    "max_tokens": 100,
    "top_p": 0,
    "n": 1,
    "frequency_penalty": 0,
    "presence_penalty": 0,
    "user_tracking": True,
}


class ClientSettings(BaseModel):
    """Transport settings shared by both API clients."""

    base_url: str = Field(
        default="https://api.openai.com/v1", description="API base URL"
    )
    timeout: float = Field(default=120.0, description="Request timeout in seconds")
    organization: str | None = Field(
        default=None, description="Optional OpenAI organization id"
    )


class AugmentorConfig(BaseModel):
    """Stored configuration of a ChatGPT augmentor.

    Sampling parameters are kept exactly as stored; they are only cast to
    numbers when a request is built.
    """

    sdk: SdkVariant | None = None
    model: str | None = None
    messages: list[Any] | None = None
    temperature: Any = None
    max_tokens: Any = None
    top_p: Any = None
    n: Any = None
    frequency_penalty: Any = None
    presence_penalty: Any = None
    user_tracking: Any = None
    client: ClientSettings = Field(default_factory=ClientSettings)

    @field_validator("sdk", mode="before")
    @classmethod
    def validate_sdk(cls, value: Any) -> SdkVariant | None:
        if value is None or value == "":
            return None
        try:
            return SdkVariant(value)
        except ValueError:
            raise ValueError(f"Unknown SDK: {value!r}") from None

    @property
    def sdk_variant(self) -> SdkVariant:
        """The SDK to use, defaulting to the raw HTTP client."""
        return SdkVariant.resolve(self.sdk)

    @classmethod
    def from_form_values(cls, values: Mapping[str, Any]) -> AugmentorConfig:
        """Build a configuration from submitted editor values.

        Sampling parameters arrive nested under ``advanced``. Only the
        numbered entries of ``messages`` are kept; buttons and help text
        sit under named keys.
        """
        messages = values.get("messages")
        if isinstance(messages, Mapping):
            messages = [
                messages[key]
                for key in messages
                if str(key).isdigit() and isinstance(messages[key], Mapping)
            ]
        elif messages is not None:
            messages = [message for message in messages if isinstance(message, Mapping)]

        advanced = values.get("advanced") or {}
        data: dict[str, Any] = {
            "sdk": values.get("sdk"),
            "model": values.get("model"),
            "messages": [dict(message) for message in messages] if messages else messages,
        }
        for name in SAMPLING_FIELDS:
            data[name] = advanced.get(name)

        try:
            return cls(**data)
        except Exception as exc:
            raise ConfigError(f"Invalid augmentor settings: {exc}") from exc

    def with_form_defaults(self) -> dict[str, Any]:
        """Return the values an editor shows, filling unset fields."""
        current = self.model_dump(mode="json", exclude={"client"})
        return {
            name: copy.deepcopy(FORM_DEFAULTS[name])
            if current.get(name) is None
            else current[name]
            for name in FORM_DEFAULTS
        }


def default_configuration() -> dict[str, Any]:
    """Configuration of a newly created augmentor: every field unset."""
    return {
        "sdk": None,
        "model": None,
        "messages": None,
        "temperature": None,
        "max_tokens": None,
        "top_p": None,
        "n": None,
        "frequency_penalty": None,
        "presence_penalty": None,
        "user_tracking": None,
    }


def load_config(path: str | Path) -> AugmentorConfig:
    """Load an augmentor configuration from a YAML file.

    Args:
        path: Path to a YAML file holding the configuration mapping.

    Returns:
        Loaded AugmentorConfig

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as file_handle:
            data = yaml.safe_load(file_handle)
    except Exception as exc:
        raise ConfigError(f"Failed to read configuration: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping: {config_path}")

    try:
        return AugmentorConfig(**data)
    except Exception as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
