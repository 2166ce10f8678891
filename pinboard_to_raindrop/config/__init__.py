"""
Configuration package for the Pinboard to Raindrop.io converter.
"""

from .configuration import Configuration
from .pydantic_config import ConfigurationManager, ConverterConfig

__all__ = ["Configuration", "ConfigurationManager", "ConverterConfig"]
