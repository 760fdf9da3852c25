"""Chat-completion API clients."""

from augmentor_chatgpt.client.factory import build_client
from augmentor_chatgpt.client.openai_sdk import OpenAISDKClient
from augmentor_chatgpt.client.parsers import (
    decode_json,
    parse_chat_response,
    parse_model_list,
)
from augmentor_chatgpt.client.protocol import ChatClient
from augmentor_chatgpt.client.raw import RawHttpClient
from augmentor_chatgpt.client.selector import ClientSelector

__all__ = [
    "ChatClient",
    "ClientSelector",
    "OpenAISDKClient",
    "RawHttpClient",
    "build_client",
    "decode_json",
    "parse_chat_response",
    "parse_model_list",
]
