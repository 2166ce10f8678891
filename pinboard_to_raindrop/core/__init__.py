"""
Core conversion modules for the Pinboard to Raindrop.io converter.
"""

from .csv_handler import RaindropCSVHandler
from .data_models import (
    DEFAULT_RAINDROP_FOLDER,
    PinboardBookmark,
    RaindropBookmark,
    TransformOptions,
)
from .pinboard_client import PINBOARD_API_ENDPOINT, PinboardClient
from .results import ConversionResults, partition_results, report_stats
from .transformer import (
    TransformResult,
    augment_tags,
    clean_description,
    parse_rfc3339,
    to_raindrop,
    transform_all,
)

__all__ = [
    "DEFAULT_RAINDROP_FOLDER",
    "PINBOARD_API_ENDPOINT",
    "ConversionResults",
    "PinboardBookmark",
    "PinboardClient",
    "RaindropBookmark",
    "RaindropCSVHandler",
    "TransformOptions",
    "TransformResult",
    "augment_tags",
    "clean_description",
    "parse_rfc3339",
    "partition_results",
    "report_stats",
    "to_raindrop",
    "transform_all",
]
