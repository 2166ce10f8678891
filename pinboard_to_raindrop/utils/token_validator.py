"""
Pinboard API Token Validation Module

Validates Pinboard API tokens without exposing them in logs or errors.
"""

import logging
import re
from typing import Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


class TokenValidator:
    """Validates and masks Pinboard API tokens."""

    # Pinboard tokens look like "username:HEXDIGITS"
    TOKEN_PATTERN = r"^[^:\s]+:[0-9A-Fa-f]+$"

    PLACEHOLDERS = (
        "your-pinboard-token-here",
        "username:token",
        "user:xxx",
    )

    @classmethod
    def validate_format(cls, token: str) -> Tuple[bool, Optional[str]]:
        """
        Validate Pinboard token format.

        Args:
            token: API token to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not token:
            return False, "API token is empty"

        if token in cls.PLACEHOLDERS:
            return False, "API token is a placeholder value"

        if ":" not in token:
            return False, "API token should look like 'username:TOKEN'"

        if not re.match(cls.TOKEN_PATTERN, token):
            return False, "API token format is invalid"

        return True, None

    @classmethod
    def sanitize_for_logging(cls, token: str) -> str:
        """
        Sanitize token for safe logging.

        Keeps the username part, which is not secret, and hides the rest.
        """
        if not token or len(token) < 10:
            return "***"

        user, sep, secret = token.partition(":")
        if sep and user:
            return f"{user}:***{secret[-3:]}" if len(secret) > 6 else f"{user}:***"

        return f"{token[:3]}...{token[-3:]}"

    @classmethod
    def mask_in_error_message(cls, message: str, tokens: Iterable[str]) -> str:
        """
        Mask any tokens that might appear in error messages.

        Args:
            message: Error message that might contain tokens
            tokens: Tokens to mask

        Returns:
            Message with tokens masked
        """
        masked_message = message
        for token in tokens:
            if token and token in masked_message:
                masked_message = masked_message.replace(
                    token, cls.sanitize_for_logging(token)
                )
        return masked_message
