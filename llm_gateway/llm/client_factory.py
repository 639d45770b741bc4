"""
LLM client factory with singleton pattern.

WHAT: Factory to get the process-wide LLMClient
WHY: Load the providers file once and share one connection pool
HOW: Read LLM_CONFIG_PATH from settings, cache singleton, log selection
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .client import LLMClient

# Singleton instance
_client_instance: "LLMClient | None" = None


def get_client(config_file_path: str | None = None) -> "LLMClient":
    """
    Get the shared LLMClient.

    Args:
        config_file_path: Overrides settings.LLM_CONFIG_PATH on first creation

    Returns:
        LLMClient built from the providers file

    Raises:
        ConfigurationError: If the providers file is missing or invalid
    """
    global _client_instance

    if _client_instance is None:
        # Import here to avoid circular dependencies
        from ..core.config import settings
        from ..utils.logger import get_logger
        from .client import LLMClient

        logger = get_logger(__name__)
        path = config_file_path or settings.LLM_CONFIG_PATH

        _client_instance = LLMClient(path)
        logger.info(f"LLM client initialized from {path}")

    return _client_instance


def reset_client() -> None:
    """Reset the client singleton (useful for testing)."""
    global _client_instance
    _client_instance = None
