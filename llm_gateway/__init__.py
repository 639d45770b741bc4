"""Provider-agnostic client for chat-style LLM HTTP APIs."""

from .llm import LLMClient, HttpApiClient, get_client, reset_client
from .models.chat import ChatMessage, LLMRequest, LLMResponse, MessageRole
from .utils.exceptions import (
    GatewayException,
    ConfigurationError,
    ModelNotFoundError,
    MissingApiKeyError,
    TransportError,
    TransportTimeoutError,
    ProviderError,
    ParseError,
)

__version__ = "0.1.0"

__all__ = [
    "LLMClient",
    "HttpApiClient",
    "get_client",
    "reset_client",
    "ChatMessage",
    "LLMRequest",
    "LLMResponse",
    "MessageRole",
    "GatewayException",
    "ConfigurationError",
    "ModelNotFoundError",
    "MissingApiKeyError",
    "TransportError",
    "TransportTimeoutError",
    "ProviderError",
    "ParseError",
]
