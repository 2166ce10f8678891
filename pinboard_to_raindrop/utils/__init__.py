"""
Utility modules for the Pinboard to Raindrop.io converter.
"""

from .error_handler import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    CSVError,
    CSVWriteError,
    DataError,
    InvalidTimestampError,
    NetworkError,
    PinboardConverterError,
    RecordError,
    ResponseParseError,
    UpstreamAPIError,
    ValidationError,
)
from .logging_setup import setup_logging
from .token_validator import TokenValidator

__all__ = [
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "CSVError",
    "CSVWriteError",
    "DataError",
    "InvalidTimestampError",
    "NetworkError",
    "PinboardConverterError",
    "RecordError",
    "ResponseParseError",
    "UpstreamAPIError",
    "ValidationError",
    "setup_logging",
    "TokenValidator",
]
