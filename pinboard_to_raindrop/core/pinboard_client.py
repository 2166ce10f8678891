"""
Pinboard API Client

This module fetches a user's complete bookmark collection from the
Pinboard v1 API in a single request and deserializes it into
PinboardBookmark records.
"""

import logging
from typing import Dict, List, Optional

import httpx

from .data_models import PinboardBookmark
from ..utils.error_handler import (
    APIError,
    AuthenticationError,
    NetworkError,
    ResponseParseError,
    UpstreamAPIError,
)
from ..utils.token_validator import TokenValidator

PINBOARD_API_ENDPOINT = "https://api.pinboard.in/v1"


class PinboardClient:
    """
    Async client for the Pinboard ``/posts/all`` endpoint.

    One request, no retries, no pagination. The transport's default
    timeout applies.

    Example:
        >>> async with PinboardClient("johndoe:ABC123") as client:
        ...     bookmarks = await client.fetch_all_bookmarks()
    """

    def __init__(self, auth_token: str, endpoint: str = PINBOARD_API_ENDPOINT):
        """
        Initialize the client.

        Args:
            auth_token: Pinboard API token ("username:TOKEN")
            endpoint: Base URL of the Pinboard v1 API
        """
        self.auth_token = auth_token
        self.endpoint = endpoint.rstrip("/")
        self.logger = logging.getLogger(self.__class__.__name__)

        # Created in __aenter__
        self._client: Optional[httpx.AsyncClient] = None

    def __repr__(self) -> str:
        return f"PinboardClient(endpoint={self.endpoint!r})"

    async def __aenter__(self) -> "PinboardClient":
        """Async context manager entry."""
        self._client = httpx.AsyncClient(
            headers={
                "User-Agent": "PinboardToRaindrop/1.0",
                "Accept": "application/json",
            },
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _build_params(self) -> Dict[str, str]:
        return {"auth_token": self.auth_token, "format": "json"}

    def _sanitize_error_message(self, message: str) -> str:
        return TokenValidator.mask_in_error_message(message, [self.auth_token])

    async def fetch_all_bookmarks(self) -> List[PinboardBookmark]:
        """
        Fetch every bookmark of the authenticated user.

        Returns:
            Bookmarks in the order Pinboard returned them

        Raises:
            NetworkError: On transport failure
            AuthenticationError: On HTTP 500 (token likely invalid)
            UpstreamAPIError: On any other non-200 status
            ResponseParseError: If the body isn't a JSON array of posts
        """
        if not self._client:
            raise APIError("Client not initialized - use async context manager")

        url = f"{self.endpoint}/posts/all"
        self.logger.debug(f"GET {url}")

        try:
            response = await self._client.get(url, params=self._build_params())
        except httpx.RequestError as e:
            sanitized_msg = self._sanitize_error_message(str(e))
            self.logger.error(f"Request to Pinboard failed: {sanitized_msg}")
            raise NetworkError(f"Request to Pinboard failed: {sanitized_msg}") from None

        status = response.status_code
        if status == 500:
            raise AuthenticationError("HTTP 500: The Pinboard API token may be invalid")
        if status != 200:
            raise UpstreamAPIError(status)

        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseParseError(f"Invalid JSON response: {e}") from e

        bookmarks = PinboardBookmark.from_api_list(payload)
        self.logger.info(f"Fetched {len(bookmarks)} bookmarks from Pinboard")
        return bookmarks


async def fetch_pinboard_bookmarks(
    auth_token: str, endpoint: str = PINBOARD_API_ENDPOINT
) -> List[PinboardBookmark]:
    """Fetch all bookmarks with a short-lived client."""
    async with PinboardClient(auth_token, endpoint) as client:
        return await client.fetch_all_bookmarks()
