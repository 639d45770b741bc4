"""
LLM client protocol definitions.

WHAT: Interfaces for the transport and the low-level API client
WHY: Decouple LLMClient from httpx so tests and callers can plug in their own
HOW: Use Protocol to define the async send methods
"""

from typing import Protocol

from ..models.result import TransportResponse
from ..models.chat import LLMRequest
from ..models.provider_config import ModelConfig, ProviderConfig


class Transport(Protocol):
    """POST capability consumed by the API client."""

    async def send(self, url: str, headers: dict[str, str], body: str) -> TransportResponse:
        """Send one request; raise TransportError on network failure."""
        ...

    async def close(self) -> None:
        ...


class ApiClient(Protocol):
    """Protocol every low-level API client must implement."""

    async def send_request(
        self,
        provider: ProviderConfig,
        model: ModelConfig,
        request: LLMRequest,
        api_key: str,
    ) -> str:
        """Send a canonical request and return the extracted answer text."""
        ...

    async def close(self) -> None:
        ...
