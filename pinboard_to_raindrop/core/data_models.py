"""
Data models for the Pinboard to Raindrop.io converter.

This module defines the source record read from the Pinboard API, the
destination record written to the Raindrop.io import CSV, and the
run-wide options that drive the mapping between them.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from ..utils.error_handler import ResponseParseError

DEFAULT_RAINDROP_FOLDER = "Pinboard Imports"


@dataclass(frozen=True)
class PinboardBookmark:
    """
    One post from the Pinboard ``/posts/all`` export.

    Pinboard's field names don't match what they hold: ``description`` is
    the title and ``extended`` is the description. The mapping is fixed by
    ``API_FIELD_MAP`` and must not be "corrected".
    """

    url: str
    title: str
    created: str  # unvalidated until transform
    description: str
    tags: str

    # Pinboard JSON key -> attribute
    API_FIELD_MAP = {
        "href": "url",
        "description": "title",
        "time": "created",
        "extended": "description",
        "tags": "tags",
    }

    @classmethod
    def from_api_dict(cls, data: Dict[str, Any]) -> "PinboardBookmark":
        """
        Create a bookmark from one element of the Pinboard JSON response.

        Args:
            data: Decoded JSON object

        Returns:
            PinboardBookmark

        Raises:
            ResponseParseError: If the object doesn't match the Pinboard schema
        """
        if not isinstance(data, dict):
            raise ResponseParseError(
                f"Expected a JSON object, got {type(data).__name__}"
            )

        values = {}
        for api_key, attr in cls.API_FIELD_MAP.items():
            if api_key not in data:
                raise ResponseParseError(f"Missing field '{api_key}' in Pinboard post")
            value = data[api_key]
            if not isinstance(value, str):
                raise ResponseParseError(
                    f"Field '{api_key}' must be a string, "
                    f"got {type(value).__name__}"
                )
            values[attr] = value

        return cls(**values)

    @classmethod
    def from_api_list(cls, payload: Any) -> List["PinboardBookmark"]:
        """Deserialize a full ``/posts/all`` response body."""
        if not isinstance(payload, list):
            raise ResponseParseError(
                f"Expected a JSON array of posts, got {type(payload).__name__}"
            )
        return [cls.from_api_dict(item) for item in payload]


@dataclass(frozen=True)
class RaindropBookmark:
    """One row of the Raindrop.io import CSV."""

    url: str
    folder: str
    title: str
    description: str
    tags: str
    created: str

    # Column order of the Raindrop.io import file
    IMPORT_COLUMNS = ["url", "folder", "title", "description", "tags", "created"]

    def to_import_dict(self) -> Dict[str, str]:
        """Convert to a dictionary keyed by import column."""
        return asdict(self)


@dataclass(frozen=True)
class TransformOptions:
    """Run-wide settings applied to every bookmark."""

    folder: str = DEFAULT_RAINDROP_FOLDER
    user_tags: Optional[str] = None
    clean_description: bool = False
