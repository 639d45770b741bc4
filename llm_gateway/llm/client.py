"""
High-level LLM client.

WHAT: Unified entry point for chat completions against any configured model
WHY: Callers pick a model by alias and never deal with provider schemas or keys
HOW: Alias lookup via ConfigurationManager, API key store, conversation assembly,
     then delegation to the API client
"""

import os
from pathlib import Path
from typing import Iterable

from .http_client import HttpApiClient
from .provider import ApiClient
from ..core.config import settings
from ..core.configuration_manager import ConfigurationManager
from ..models.chat import ChatMessage, LLMRequest, LLMResponse, MessageRole
from ..models.provider_config import ModelConfig, ProviderConfig
from ..utils.exceptions import MissingApiKeyError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class LLMClient:
    """Send prompts to any configured model using a simple alias."""

    def __init__(
        self,
        config_file_path: str | Path | None = None,
        api_client: ApiClient | None = None,
        *,
        configuration_manager: ConfigurationManager | None = None,
    ):
        """
        Args:
            config_file_path: Providers JSON file (ignored when configuration_manager is given)
            api_client: Low-level client; HttpApiClient by default
            configuration_manager: Pre-built configuration (tests, embedding)
        """
        self.configuration_manager = configuration_manager or ConfigurationManager(config_file_path)
        self.api_client = api_client or HttpApiClient()
        self._api_keys: dict[str, str] = {}

    def set_api_key(self, provider_name: str, api_key: str) -> None:
        """
        Store the API key for a provider (names are case-insensitive).

        Raises:
            ValueError: Blank provider name
        """
        if not provider_name or not provider_name.strip():
            raise ValueError("Provider name cannot be null or empty.")
        self._api_keys[provider_name.strip().lower()] = api_key

    def _resolve_api_key(self, provider: ProviderConfig) -> str:
        api_key = self._api_keys.get(provider.provider_name.lower())
        if not api_key and provider.api_key_env:
            api_key = os.environ.get(provider.api_key_env)
        if not api_key:
            raise MissingApiKeyError(provider.provider_name, provider.api_key_env)
        return api_key

    @staticmethod
    def build_conversation(
        model: ModelConfig,
        user_prompt: str,
        conversation_history: Iterable[ChatMessage] | None,
        system_prompt: str | None,
    ) -> tuple[list[ChatMessage], str | None]:
        """
        Assemble the turns and effective system prompt for one request.

        An explicit system prompt wins over the first system turn in the
        history. System turns are removed from the history and the user prompt
        is appended. Models without a system-prompt path get the effective
        system prompt as a leading system turn instead.
        """
        history = list(conversation_history or [])

        effective_system = system_prompt
        if effective_system is None:
            effective_system = next((m.content for m in history if m.role == MessageRole.SYSTEM), None)

        conversation = [m for m in history if m.role != MessageRole.SYSTEM]
        conversation.append(ChatMessage(MessageRole.USER, user_prompt))

        if effective_system and not model.mapping.system_prompt_path:
            conversation.insert(0, ChatMessage(MessageRole.SYSTEM, effective_system))

        return conversation, effective_system

    async def get_chat_completion(
        self,
        model_alias: str,
        user_prompt: str,
        conversation_history: Iterable[ChatMessage] | None = None,
        system_prompt: str | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        """
        Send a prompt to the model behind `model_alias`.

        Args:
            model_alias: Alias from the configuration file
            user_prompt: New user message
            conversation_history: Previous turns for context
            system_prompt: Overrides any system turn found in the history
            temperature: Sampling temperature (settings.LLM_DEFAULT_TEMPERATURE if omitted)

        Returns:
            LLMResponse with the answer and the request that produced it

        Raises:
            ValueError: Blank user prompt
            ModelNotFoundError: Unknown alias
            MissingApiKeyError: No key set and none in the environment
            ConfigurationError, TransportError, ProviderError, ParseError: From the API client
        """
        if not user_prompt or not user_prompt.strip():
            raise ValueError("User prompt cannot be null or empty.")

        provider, model = self.configuration_manager.get_model(model_alias)
        api_key = self._resolve_api_key(provider)

        conversation, effective_system = self.build_conversation(
            model, user_prompt, conversation_history, system_prompt
        )

        request = LLMRequest.create(
            model_alias,
            conversation,
            system_prompt=effective_system,
            temperature=settings.LLM_DEFAULT_TEMPERATURE if temperature is None else temperature,
        )

        logger.debug(f"Chat completion requested (alias: {model_alias}, provider: {provider.provider_name})")
        content = await self.api_client.send_request(provider, model, request, api_key)
        return LLMResponse(content=content, original_request=request)

    async def close(self):
        """Release the API client's resources."""
        await self.api_client.close()
