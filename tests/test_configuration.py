"""
Unit tests for the Pydantic configuration system.
"""

import json

import pytest
import toml

from pinboard_to_raindrop.config.configuration import Configuration
from pinboard_to_raindrop.config.pydantic_config import (
    TOKEN_ENV_VAR,
    ConfigurationManager,
    ConverterConfig,
    PinboardConfig,
)
from pinboard_to_raindrop.core.data_models import TransformOptions
from pinboard_to_raindrop.utils.error_handler import ConfigurationError


class TestConverterConfig:
    """Test configuration models and validators."""

    def test_defaults(self):
        config = ConverterConfig()

        assert config.pinboard.api_token is None
        assert config.pinboard.endpoint == "https://api.pinboard.in/v1"
        assert config.output.raindrop_folder == "Pinboard Imports"
        assert config.output.user_tags is None
        assert config.output.clean_description is False
        assert config.logging.log_level == "INFO"
        assert config.logging.log_to_file is False

    def test_token_is_secret(self, pinboard_token):
        config = PinboardConfig(api_token=pinboard_token)

        assert config.api_token.get_secret_value() == pinboard_token
        assert pinboard_token not in repr(config)

    def test_placeholder_token_rejected(self):
        with pytest.raises(ValueError):
            PinboardConfig(api_token="your-pinboard-token-here")

    def test_unusual_token_warns(self):
        with pytest.warns(UserWarning):
            PinboardConfig(api_token="not-a-pinboard-token")

    def test_endpoint_must_be_http(self):
        with pytest.raises(ValueError):
            PinboardConfig(endpoint="ftp://api.pinboard.in/v1")

    def test_log_level_case_insensitive(self):
        config = ConverterConfig(logging={"log_level": "debug"})
        assert config.logging.log_level == "DEBUG"


class TestConfigurationManager:
    """Test loading configuration from files and environment."""

    def test_load_toml(self, tmp_path, pinboard_token):
        path = tmp_path / "config.toml"
        path.write_text(
            toml.dumps(
                {
                    "pinboard": {"api_token": pinboard_token},
                    "output": {"raindrop_folder": "Archive", "clean_description": True},
                }
            ),
            encoding="utf-8",
        )

        manager = ConfigurationManager(path)

        assert manager.get_api_token() == pinboard_token
        assert manager.config.output.raindrop_folder == "Archive"
        assert manager.config.output.clean_description is True

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output": {"user_tags": "@pinboard"}}), encoding="utf-8")

        manager = ConfigurationManager(path)

        assert manager.config.output.user_tags == "@pinboard"
        assert manager.has_api_token() is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(tmp_path / "missing.toml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[pinboard]\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(path)

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("this is = = not toml", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(path)

    def test_validation_error_is_readable(self, tmp_path, pinboard_token):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "pinboard": {"api_token": pinboard_token},
                    "logging": {"log_level": "LOUD"},
                }
            ),
            encoding="utf-8",
        )

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(path)

        message = str(exc_info.value)
        assert "logging -> log_level" in message
        assert pinboard_token not in message

    def test_token_from_environment(self, monkeypatch, pinboard_token):
        monkeypatch.setenv(TOKEN_ENV_VAR, pinboard_token)

        assert ConfigurationManager().get_api_token() == pinboard_token

    def test_file_token_wins_over_environment(self, monkeypatch, tmp_path, pinboard_token):
        monkeypatch.setenv(TOKEN_ENV_VAR, "other:ABCDEF012345")
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"pinboard": {"api_token": pinboard_token}}), encoding="utf-8"
        )

        assert ConfigurationManager(path).get_api_token() == pinboard_token

    def test_cli_args_override(self, monkeypatch, pinboard_token):
        monkeypatch.setenv(TOKEN_ENV_VAR, "other:ABCDEF012345")
        manager = ConfigurationManager()

        manager.update_from_cli_args(
            {
                "pinboard_token": pinboard_token,
                "raindrop_folder": "Imported",
                "user_tags": "@pinboard",
                "clean_description": True,
                "verbose": True,
            }
        )

        assert manager.get_api_token() == pinboard_token
        assert manager.config.output.raindrop_folder == "Imported"
        assert manager.config.output.user_tags == "@pinboard"
        assert manager.config.output.clean_description is True
        assert manager.config.logging.log_level == "DEBUG"

    def test_cli_args_keep_existing_token(self, monkeypatch, pinboard_token):
        monkeypatch.setenv(TOKEN_ENV_VAR, pinboard_token)
        manager = ConfigurationManager()

        manager.update_from_cli_args({"pinboard_token": None, "raindrop_folder": None})

        assert manager.get_api_token() == pinboard_token
        assert manager.config.output.raindrop_folder == "Pinboard Imports"

    def test_empty_user_tags_are_none(self):
        manager = ConfigurationManager()

        manager.update_from_cli_args({"user_tags": ""})

        assert manager.config.output.user_tags is None

    def test_empty_folder_rejected(self):
        manager = ConfigurationManager()

        with pytest.raises(ConfigurationError):
            manager.update_from_cli_args({"raindrop_folder": ""})

    def test_create_sample_config_round_trip(self, tmp_path):
        path = tmp_path / "sample.toml"
        ConfigurationManager().create_sample_config(path)

        data = toml.load(str(path))

        assert data["output"]["raindrop_folder"] == "Pinboard Imports"
        assert data["pinboard"]["endpoint"] == "https://api.pinboard.in/v1"


class TestConfiguration:
    """Test the Configuration facade."""

    def test_transform_options(self, pinboard_token):
        config = Configuration()
        config.update_from_args(
            {
                "pinboard_token": pinboard_token,
                "raindrop_folder": "Imported",
                "user_tags": "@pinboard",
                "clean_description": True,
            }
        )

        assert config.get_transform_options() == TransformOptions(
            folder="Imported", user_tags="@pinboard", clean_description=True
        )
        assert config.has_api_token() is True
        assert config.get_endpoint() == "https://api.pinboard.in/v1"
