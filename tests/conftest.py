"""
Pytest configuration and shared fixtures for gateway tests.

WHAT: Centralized test configuration with markers and mapping fixtures
WHY: Enable test organization, filtering, and shared provider configs
HOW: Define pytest markers, fixtures, and test data constants
"""

import json
from pathlib import Path

import pytest

from llm_gateway.core.configuration_manager import ConfigurationManager
from llm_gateway.llm.client_factory import reset_client
from llm_gateway.models.provider_config import ModelConfig, ProviderConfig

EXAMPLE_CONFIG_PATH = Path(__file__).parent.parent / "config" / "providers.example.json"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (isolated component tests)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (client + mocked HTTP)"
    )


@pytest.fixture(autouse=True)
def reset_client_singleton():
    """
    Reset client singleton before each test.

    WHAT: Clear client cache between tests
    WHY: Prevent test pollution and ensure clean state
    HOW: Call reset_client() before and after each test
    """
    reset_client()
    yield
    reset_client()


# Test data constants
GEMINI_MAPPING = {
    "systemPromptPath": "systemInstruction.parts[0].text",
    "messagesArrayPath": "contents",
    "messageRolePath": "role",
    "messageContentPath": "parts[0].text",
    "temperaturePath": "generationConfig.temperature",
    "responseContentPath": "candidates[0].content.parts[0].text",
    "responseErrorPath": "error.message",
}

OPENAI_MAPPING = {
    "modelNamePath": "model",
    "messagesArrayPath": "messages",
    "messageRolePath": "role",
    "messageContentPath": "content",
    "temperaturePath": "temperature",
    "responseContentPath": "choices[0].message.content",
    "responseErrorPath": "error.message",
}

GEMINI_SUCCESS_BODY = {"candidates": [{"content": {"parts": [{"text": "Madrid"}]}}]}

OPENAI_SUCCESS_BODY = {
    "choices": [{"message": {"role": "assistant", "content": "Hello, world!"}}],
    "usage": {"total_tokens": 10},
    "model": "test-model"
}

TEST_CONFIGURATION = {
    "providers": [
        {
            "providerName": "Google",
            "baseUrl": "https://gemini.test/",
            "authHeaderName": "x-goog-api-key",
            "authHeaderValueTemplate": "{ApiKey}",
            "models": [
                {
                    "modelName": "gemini-test",
                    "aliases": ["gemini"],
                    "endpoint": "/v1beta/models/{ModelName}:generateContent",
                    "mapping": GEMINI_MAPPING,
                }
            ],
        },
        {
            "providerName": "OpenAI",
            "baseUrl": "https://openai.test",
            "apiKeyEnv": "TEST_OPENAI_API_KEY",
            "models": [
                {
                    "modelName": "gpt-test",
                    "aliases": ["gpt", "default"],
                    "endpoint": "v1/chat/completions",
                    "mapping": OPENAI_MAPPING,
                }
            ],
        },
    ]
}

GEMINI_URL = "https://gemini.test/v1beta/models/gemini-test:generateContent"
OPENAI_URL = "https://openai.test/v1/chat/completions"


@pytest.fixture
def gemini_model() -> ModelConfig:
    """Gemini-style model config (system instruction + nested parts)."""
    return ModelConfig.model_validate(TEST_CONFIGURATION["providers"][0]["models"][0])


@pytest.fixture
def openai_model() -> ModelConfig:
    """OpenAI-style model config (flat messages, model name in body)."""
    return ModelConfig.model_validate(TEST_CONFIGURATION["providers"][1]["models"][0])


@pytest.fixture
def gemini_provider() -> ProviderConfig:
    return ProviderConfig.model_validate(TEST_CONFIGURATION["providers"][0])


@pytest.fixture
def openai_provider() -> ProviderConfig:
    return ProviderConfig.model_validate(TEST_CONFIGURATION["providers"][1])


@pytest.fixture
def configuration_manager() -> ConfigurationManager:
    """ConfigurationManager over the in-memory test configuration."""
    return ConfigurationManager.from_dict(TEST_CONFIGURATION)


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Test configuration written to a temporary providers file."""
    path = tmp_path / "providers.json"
    path.write_text(json.dumps(TEST_CONFIGURATION), encoding="utf-8")
    return path
