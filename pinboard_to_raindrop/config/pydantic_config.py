"""
Pydantic-based configuration system for the Pinboard to Raindrop.io converter.

Settings come from built-in defaults, an optional TOML or JSON file, the
PINBOARD_API_TOKEN environment variable and finally command-line flags.
"""

import json
import os
import warnings
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import toml
from pydantic import (
    BaseModel,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
)

from ..core.data_models import DEFAULT_RAINDROP_FOLDER
from ..core.pinboard_client import PINBOARD_API_ENDPOINT
from ..utils.error_handler import ConfigurationError
from ..utils.token_validator import TokenValidator

TOKEN_ENV_VAR = "PINBOARD_API_TOKEN"


class PinboardConfig(BaseModel):
    """Pinboard API access settings."""

    api_token: Optional[SecretStr] = Field(
        default=None,
        description="Pinboard API token (username:TOKEN)",
    )
    endpoint: str = Field(
        default=PINBOARD_API_ENDPOINT,
        description="Base URL of the Pinboard v1 API",
    )

    @field_validator("api_token", mode="before")
    @classmethod
    def validate_api_token(cls, v):
        """Reject placeholder tokens and warn about odd-looking ones."""
        if v is None or v == "":
            return None

        token = v.get_secret_value() if isinstance(v, SecretStr) else str(v)

        if token in TokenValidator.PLACEHOLDERS:
            raise ValueError(
                "Please replace the placeholder Pinboard API token with your "
                "actual token from https://pinboard.in/settings/password"
            )

        is_valid, error_msg = TokenValidator.validate_format(token)
        if not is_valid:
            warnings.warn(
                f"Pinboard API token looks unusual ({error_msg}). "
                f"Please verify it is correct.",
                UserWarning,
            )

        return SecretStr(token)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError("Endpoint must be an http(s) URL")
        return v.rstrip("/")


class OutputConfig(BaseModel):
    """Settings applied to every converted bookmark."""

    raindrop_folder: str = Field(
        default=DEFAULT_RAINDROP_FOLDER,
        min_length=1,
        description="Raindrop.io folder for the imported bookmarks",
    )
    user_tags: Optional[str] = Field(
        default=None,
        description="Tags appended to every bookmark",
    )
    clean_description: bool = Field(
        default=False,
        description="Collapse line breaks in descriptions",
    )

    @field_validator("user_tags", mode="before")
    @classmethod
    def empty_tags_to_none(cls, v):
        if v == "":
            return None
        return v


class LoggingConfig(BaseModel):
    """Logging settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_to_file: bool = False
    log_dir: Path = Path("logs")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class ConverterConfig(BaseModel):
    """Main configuration model."""

    pinboard: PinboardConfig = Field(default_factory=PinboardConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[ConverterConfig] = None
        self._load_configuration(config_path)

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data: Dict[str, Any] = {}

        if config_path:
            config_data = self._load_config_file(Path(config_path))

        self._load_token_from_env(config_data)
        self._config = self._build(config_data)

    def _load_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                return toml.load(str(config_path))
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError, toml.TomlDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            )

    def _load_token_from_env(self, config_data: Dict[str, Any]) -> None:
        """Use PINBOARD_API_TOKEN when the file doesn't set a token."""
        pinboard = config_data.setdefault("pinboard", {})
        token = os.getenv(TOKEN_ENV_VAR)
        if token and not pinboard.get("api_token"):
            pinboard["api_token"] = token

    @staticmethod
    def _build(config_data: Dict[str, Any]) -> ConverterConfig:
        try:
            return ConverterConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(
                ConfigurationErrorFormatter.format_validation_error(e)
            )

    def update_from_cli_args(self, args: Dict[str, Any]) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        # SecretStr dumps masked; put the real value back
        if self._config.pinboard.api_token:
            config_dict["pinboard"]["api_token"] = (
                self._config.pinboard.api_token.get_secret_value()
            )

        if args.get("pinboard_token"):
            config_dict["pinboard"]["api_token"] = args["pinboard_token"]

        if args.get("raindrop_folder") is not None:
            config_dict["output"]["raindrop_folder"] = args["raindrop_folder"]

        if args.get("user_tags") is not None:
            config_dict["output"]["user_tags"] = args["user_tags"]

        if args.get("clean_description"):
            config_dict["output"]["clean_description"] = True

        if args.get("verbose"):
            config_dict["logging"]["log_level"] = "DEBUG"

        self._config = self._build(config_dict)

    @property
    def config(self) -> ConverterConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    def get_api_token(self) -> Optional[str]:
        """Get the Pinboard API token, returning the actual secret value."""
        if self.config.pinboard.api_token:
            return self.config.pinboard.api_token.get_secret_value()
        return None

    def has_api_token(self) -> bool:
        """Check if a Pinboard API token is configured."""
        return self.get_api_token() is not None

    def create_sample_config(self, output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "pinboard": {
                # Note: the token should not be committed to version control
                "api_token": "your-pinboard-token-here",
                "endpoint": PINBOARD_API_ENDPOINT,
            },
            "output": {
                "raindrop_folder": DEFAULT_RAINDROP_FOLDER,
                "user_tags": "@pinboard",
                "clean_description": False,
            },
            "logging": {"log_level": "INFO", "log_to_file": False, "log_dir": "logs"},
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            error_messages.append(
                ConfigurationErrorFormatter._format_by_error_type(
                    location, error_detail["type"], error_detail
                )
            )

        header = "Configuration Validation Failed:\n"
        return header + "\n".join(error_messages)

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"
        return " -> ".join(str(part) for part in location)

    @staticmethod
    def _format_by_error_type(location: str, error_type: str, error_detail: dict) -> str:
        """Format error message based on Pydantic error type."""
        input_value = error_detail.get("input", "N/A")

        # Never echo the token back
        if "api_token" in location:
            input_value = "***"

        if error_type == "missing":
            return f"  {location}: Required field is missing"

        elif error_type == "literal_error":
            expected = error_detail.get("ctx", {}).get("expected", "valid option")
            return f"  {location}: Must be one of {expected} (got: {input_value})"

        elif error_type == "string_too_short":
            return f"  {location}: Value cannot be empty"

        else:
            msg = error_detail.get("msg", "Invalid configuration value")
            return f"  {location}: {msg} (got: {input_value})"
