"""Configuration management for Cluster Reflector."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from reflector.core.exceptions import ConfigurationError


class AzureConfig(BaseModel):
    """Azure provider configuration."""

    subscription_id: str
    exclude_credential_sources: list[str] = Field(default_factory=list)
    retry_total: int = Field(0, ge=0)
    base_url: str | None = None

    @field_validator("subscription_id")
    @classmethod
    def _subscription_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("subscription_id must not be empty")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"
    output: str = "stderr"


class ReflectorConfig(BaseModel):
    """Main Cluster Reflector configuration."""

    provider: str = "azure"
    azure: AzureConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: str | Path) -> "ReflectorConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to configuration file

        Returns:
            ReflectorConfig instance

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        config_path = Path(path).expanduser()

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f)
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReflectorConfig":
        """Build configuration from a dictionary.

        Raises:
            ConfigurationError: If the data is not a valid configuration
        """
        try:
            return cls(**data)
        except Exception as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
