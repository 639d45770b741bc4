"""
Provider configuration loading.

WHAT: Load the providers JSON file and resolve model aliases
WHY: One validated, immutable view of every provider/model mapping
HOW: Pydantic validation of the file, then a flat alias -> (provider, model) map
"""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..models.provider_config import GatewayConfiguration, ModelConfig, ProviderConfig
from ..utils.exceptions import ConfigurationError, ModelNotFoundError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ConfigurationManager:
    """Alias lookup over a validated GatewayConfiguration."""

    def __init__(self, config_file_path: str | Path | None = None, *, configuration: GatewayConfiguration | None = None):
        """
        Load configuration from a file or take an already-built one.

        Args:
            config_file_path: Path to the providers JSON file
            configuration: Pre-validated configuration (used instead of the file)

        Raises:
            ConfigurationError: Missing/malformed file, schema violation or duplicate alias
        """
        if configuration is None:
            if config_file_path is None:
                raise ConfigurationError("Either a configuration file path or a configuration is required.")
            configuration = self._load_file(Path(config_file_path))

        self.configuration = configuration
        self._alias_map: dict[str, tuple[ProviderConfig, ModelConfig]] = {}
        self._build_alias_map()

        logger.info(
            f"Configuration loaded ({len(configuration.providers)} providers, {len(self._alias_map)} aliases)"
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConfigurationManager":
        """Build from an in-memory mapping with the same shape as the JSON file."""
        try:
            configuration = GatewayConfiguration.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid provider configuration.",
                details={"errors": e.errors(include_url=False)},
            ) from e
        return cls(configuration=configuration)

    @staticmethod
    def _load_file(path: Path) -> GatewayConfiguration:
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}", path=str(path))

        try:
            return GatewayConfiguration.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            logger.error(f"Invalid configuration file {path}: {e.error_count()} error(s)")
            raise ConfigurationError(
                "Failed to parse the JSON configuration file. Check for malformed JSON.",
                path=str(path),
                details={"errors": e.errors(include_url=False)},
            ) from e

    def _build_alias_map(self) -> None:
        for provider in self.configuration.providers:
            for model in provider.models:
                for alias in model.aliases:
                    if not alias or not alias.strip():
                        continue
                    if alias in self._alias_map:
                        raise ConfigurationError(
                            f"Duplicate model alias found in configuration: '{alias}'. "
                            "Aliases must be unique across all providers.",
                            field="aliases",
                            details={"alias": alias, "provider": provider.provider_name},
                        )
                    self._alias_map[alias] = (provider, model)

    def try_get_model(self, alias: str) -> tuple[ProviderConfig, ModelConfig] | None:
        """Provider and model for an alias, or None."""
        return self._alias_map.get(alias)

    def get_model(self, alias: str) -> tuple[ProviderConfig, ModelConfig]:
        """
        Provider and model for an alias.

        Raises:
            ModelNotFoundError: Unknown alias
        """
        found = self.try_get_model(alias)
        if found is None:
            raise ModelNotFoundError(alias)
        return found

    def aliases(self) -> list[str]:
        return sorted(self._alias_map)
