"""augmentor-chatgpt: chat completion text augmentation backed by the OpenAI API."""

from augmentor_chatgpt.augmentor import (
    GENERIC_ERROR_MESSAGE,
    ChatGptAugmentor,
    build_messages,
)
from augmentor_chatgpt.client import (
    ChatClient,
    ClientSelector,
    OpenAISDKClient,
    RawHttpClient,
    build_client,
)
from augmentor_chatgpt.collaborators import (
    AnonymousUser,
    CurrentUserProvider,
    EnvKeyProvider,
    FileKeyProvider,
    KeyProvider,
    StaticKeyProvider,
    StaticUser,
    TextNormalizer,
    WhitespaceNormalizer,
)
from augmentor_chatgpt.config import (
    DEFAULT_ENGINE,
    FORM_DEFAULTS,
    MESSAGE_ROLES,
    SUPPORTED_MODELS,
    AugmentorConfig,
    ClientSettings,
    default_configuration,
    load_config,
)
from augmentor_chatgpt.exceptions import (
    AugmentorError,
    ClientError,
    ConfigError,
    ProviderRequestError,
    ResponseDecodeError,
)
from augmentor_chatgpt.types import (
    AugmentorResult,
    ChatCompletion,
    ChatMessage,
    ProviderFailure,
    SdkVariant,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChatGptAugmentor",
    "GENERIC_ERROR_MESSAGE",
    "build_messages",
    "AugmentorConfig",
    "ClientSettings",
    "DEFAULT_ENGINE",
    "FORM_DEFAULTS",
    "MESSAGE_ROLES",
    "SUPPORTED_MODELS",
    "default_configuration",
    "load_config",
    "ChatClient",
    "ClientSelector",
    "OpenAISDKClient",
    "RawHttpClient",
    "build_client",
    "KeyProvider",
    "StaticKeyProvider",
    "EnvKeyProvider",
    "FileKeyProvider",
    "CurrentUserProvider",
    "StaticUser",
    "AnonymousUser",
    "TextNormalizer",
    "WhitespaceNormalizer",
    "AugmentorResult",
    "ChatCompletion",
    "ChatMessage",
    "ProviderFailure",
    "SdkVariant",
    "AugmentorError",
    "ConfigError",
    "ClientError",
    "ProviderRequestError",
    "ResponseDecodeError",
]
