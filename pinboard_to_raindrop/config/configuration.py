"""
Configuration management for the Pinboard to Raindrop.io converter.

This module wraps the Pydantic-based configuration system with the small
interface the CLI and converter need.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from .pydantic_config import ConfigurationManager, ConverterConfig
from ..core.data_models import TransformOptions


class Configuration:
    """
    Configuration facade over ConfigurationManager.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to user configuration file (TOML/JSON)
        """
        self._manager = ConfigurationManager(config_path)
        self._config = self._manager.config

    @property
    def config(self) -> ConverterConfig:
        """Get the underlying Pydantic configuration."""
        return self._config

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update configuration from command-line arguments.

        Args:
            args: Dictionary of validated arguments
        """
        self._manager.update_from_cli_args(args)
        self._config = self._manager.config

    def get_api_token(self) -> Optional[str]:
        """Get the Pinboard API token. Returns None if not configured."""
        return self._manager.get_api_token()

    def has_api_token(self) -> bool:
        """Check if a Pinboard API token is configured."""
        return self._manager.has_api_token()

    def get_endpoint(self) -> str:
        """Get the Pinboard API base URL."""
        return self._config.pinboard.endpoint

    def get_transform_options(self) -> TransformOptions:
        """Build the run-wide transform options."""
        output = self._config.output
        return TransformOptions(
            folder=output.raindrop_folder,
            user_tags=output.user_tags,
            clean_description=output.clean_description,
        )
