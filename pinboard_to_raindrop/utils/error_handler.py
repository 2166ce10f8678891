"""
Unified Exception Hierarchy

This module defines every exception raised by the Pinboard to Raindrop.io
converter. Fatal errors abort the run; record errors are isolated to a
single bookmark and only counted.
"""

from typing import Optional


# ============================================================================
# Unified Exception Hierarchy for the converter
# ============================================================================
# All custom exceptions for the project are defined here.
# Import these exceptions from pinboard_to_raindrop.utils.error_handler
# ============================================================================


class PinboardConverterError(Exception):
    """Base exception for all converter errors."""

    pass


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(PinboardConverterError):
    """Command-line argument and path validation errors."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(PinboardConverterError):
    """Configuration-related errors."""

    pass


# ============================================================================
# Network Errors
# ============================================================================


class NetworkError(PinboardConverterError):
    """Transport-level failure talking to the Pinboard API."""

    pass


# ============================================================================
# API Errors
# ============================================================================


class APIError(PinboardConverterError):
    """Base class for Pinboard API errors."""

    pass


class AuthenticationError(APIError):
    """Pinboard answered HTTP 500, which means the token is likely invalid."""

    pass


class UpstreamAPIError(APIError):
    """Pinboard answered with an unexpected HTTP status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(
            message or f"HTTP {status_code}: Unknown error with the Pinboard API"
        )


class ResponseParseError(APIError):
    """Response body is not a JSON array of Pinboard posts."""

    pass


# ============================================================================
# Record Errors (recoverable, one bookmark at a time)
# ============================================================================


class RecordError(PinboardConverterError):
    """A single bookmark could not be converted; the run continues."""

    pass


class InvalidTimestampError(RecordError):
    """The bookmark's creation time is not a valid RFC 3339 timestamp."""

    def __init__(self, value: str, url: Optional[str] = None):
        self.value = value
        self.url = url
        message = f"Invalid RFC 3339 timestamp: {value!r}"
        if url:
            message += f" (url: {url})"
        super().__init__(message)


# ============================================================================
# Data Errors
# ============================================================================


class DataError(PinboardConverterError):
    """Base class for data-related errors."""

    pass


class CSVError(DataError):
    """CSV file handling errors."""

    pass


class CSVWriteError(CSVError):
    """The import CSV could not be opened, written or flushed."""

    pass
