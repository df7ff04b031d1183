"""Configuration models and persistence for onboard-cli."""

from .settings import (
    ConfigManager,
    LoggingConfig,
    PreflightConfig,
    ProviderConfig,
    Settings,
    load_config,
)

__all__ = [
    "ConfigManager",
    "LoggingConfig",
    "PreflightConfig",
    "ProviderConfig",
    "Settings",
    "load_config",
]
