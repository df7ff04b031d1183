"""Unit tests for configuration loading and saving."""

import pytest
from pydantic import ValidationError

from onboard_cli.config.settings import (
    ConfigManager,
    LoggingConfig,
    PreflightConfig,
    ProviderConfig,
    Settings,
    load_config,
)
from onboard_cli.exceptions import ConfigError


def test_missing_file_gives_defaults(config_path):
    settings = load_config(config_path)

    assert settings.providers == {}
    assert settings.default_model is None
    assert settings.preflight.timeout_ms == 3500
    assert settings.logging.level == "INFO"


def test_save_and_load(config_path):
    manager = ConfigManager(config_path)
    settings = Settings(
        providers={"ollama": ProviderConfig(base_url="http://127.0.0.1:11434/v1", models=["llama3.3"])},
        default_model="ollama/llama3.3",
        model_aliases={"ollama": "ollama/llama3.3"},
    )

    manager.save(settings)
    loaded = manager.load()

    assert config_path.exists()
    assert loaded.providers == settings.providers
    assert loaded.default_model == "ollama/llama3.3"
    assert loaded.model_aliases == {"ollama": "ollama/llama3.3"}


def test_invalid_toml_raises_config_error(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("providers = [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_invalid_values_raise_config_error(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text('[preflight]\ntimeout_ms = 5\n', encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_path)


class TestValidators:
    def test_provider_base_url_must_be_http(self):
        with pytest.raises(ValidationError):
            ProviderConfig(base_url="127.0.0.1:11434/v1")

    def test_provider_api_must_be_supported(self):
        with pytest.raises(ValidationError):
            ProviderConfig(base_url="http://127.0.0.1:11434/v1", api="grpc")

    @pytest.mark.parametrize("timeout_ms", [99, 60001])
    def test_preflight_timeout_bounds(self, timeout_ms):
        with pytest.raises(ValidationError):
            PreflightConfig(timeout_ms=timeout_ms)

    def test_log_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="chatty")
