"""LLM client layer."""

from .provider import ApiClient, Transport
from .transport import HttpTransport
from .http_client import HttpApiClient
from .client import LLMClient
from .client_factory import get_client, reset_client

__all__ = [
    "ApiClient",
    "Transport",
    "HttpTransport",
    "HttpApiClient",
    "LLMClient",
    "get_client",
    "reset_client",
]
