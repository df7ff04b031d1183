"""Configuration management for onboard-cli."""

import logging
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".onboard_cli" / "config.toml"

SUPPORTED_APIS = ("openai", "anthropic")


class ProviderConfig(BaseModel):
    """A model provider reachable over an HTTP API.

    Written by the custom provider prompt, either directly or seeded from a
    local preset (Ollama, LM Studio).
    """

    base_url: str = Field(..., description="API base URL, e.g. http://127.0.0.1:11434/v1")
    api: str = Field("openai", description="Wire compatibility mode (openai, anthropic)")
    models: list[str] = Field(default_factory=list, description="Model ids served by this provider")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base URL is an http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got: {v}")
        return v

    @field_validator("api")
    @classmethod
    def validate_api(cls, v: str) -> str:
        """Validate api is a supported compatibility mode."""
        if v not in SUPPORTED_APIS:
            raise ValueError(f"api must be one of {list(SUPPORTED_APIS)}, got: {v}")
        return v


class PreflightConfig(BaseModel):
    """Local endpoint preflight configuration."""

    timeout_ms: int = 3500

    @field_validator("timeout_ms")
    @classmethod
    def validate_timeout_ms(cls, v: int) -> int:
        """Validate timeout_ms is within reasonable bounds."""
        if v < 100:
            raise ValueError("timeout_ms must be at least 100")
        if v > 60000:
            raise ValueError("timeout_ms must not exceed 60000")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: Optional[str] = None
    max_size: int = 10485760
    backup_count: int = 5
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """Main settings class that loads from config.toml."""

    providers: dict[str, ProviderConfig] = Field(default_factory=dict)
    default_model: Optional[str] = None  # "<provider_id>/<model_id>"
    model_aliases: dict[str, str] = Field(default_factory=dict)
    preflight: PreflightConfig = Field(default_factory=PreflightConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(env_prefix="ONBOARD_", case_sensitive=False, protected_namespaces=())


class ConfigManager:
    """Manages loading and saving of the application settings."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH

    def load(self) -> Settings:
        """Load configuration from the TOML file, or defaults if it is missing."""
        if not self.config_path.exists():
            logger.debug(f"No config at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, encoding="utf-8") as f:
                config_data = toml.load(f)
            return Settings(**config_data)
        except (OSError, toml.TomlDecodeError, ValidationError) as e:
            raise ConfigError(f"Error loading config file {self.config_path}: {e}") from e

    def save(self, settings: Settings) -> None:
        """Save configuration to the TOML file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                toml.dump(settings.model_dump(exclude_none=True), f)
        except OSError as e:
            raise ConfigError(f"Error saving config file {self.config_path}: {e}") from e
        logger.info(f"Configuration saved to {self.config_path}")


def load_config(config_path: Optional[Path] = None) -> Settings:
    """Load configuration from TOML file."""
    return ConfigManager(config_path).load()
