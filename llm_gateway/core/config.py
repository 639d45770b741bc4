"""
Runtime settings for the gateway.

WHAT: Providers file location, HTTP timeouts/pool size, request and log defaults
WHY: Deployment-specific values stay out of the providers file and the code
HOW: Pydantic BaseSettings reads LLM_* and LOG_* from the environment and .env
"""

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App metadata
    APP_NAME: str = "LLM Gateway"
    APP_VERSION: str = "0.1.0"

    # Provider/model mapping file
    LLM_CONFIG_PATH: str = "./config/providers.json"

    # Transport
    LLM_CONNECT_TIMEOUT: float = 5.0  # seconds
    LLM_REQUEST_TIMEOUT: float = 60.0  # seconds, read timeout for cloud APIs
    LLM_MAX_CONNECTIONS: int = 20
    LLM_MAX_KEEPALIVE_CONNECTIONS: int = 10

    # Request defaults
    LLM_DEFAULT_TEMPERATURE: float = 0.7

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "./data/logs/llm_gateway.log"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    class Config:
        # Look for .env in the project root
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Singleton instance
settings = Settings()
