"""
Pinboard to Raindrop.io Converter

This module provides the PinboardToRaindropConverter class that runs the
single fetch-transform-write pass: fetch every Pinboard post, convert each
one, report the counts and write the Raindrop.io import CSV.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Union

from .csv_handler import RaindropCSVHandler
from .data_models import PinboardBookmark, TransformOptions
from .pinboard_client import PINBOARD_API_ENDPOINT, fetch_pinboard_bookmarks
from .results import ConversionResults, partition_results, report_stats
from .transformer import transform_all


class PinboardToRaindropConverter:
    """Orchestrates fetch → transform → report → write."""

    def __init__(
        self,
        auth_token: str,
        options: TransformOptions,
        endpoint: str = PINBOARD_API_ENDPOINT,
    ):
        self.auth_token = auth_token
        self.options = options
        self.endpoint = endpoint
        self.csv_handler = RaindropCSVHandler()
        self.logger = logging.getLogger(__name__)

    async def fetch(self) -> List[PinboardBookmark]:
        """Fetch the complete Pinboard collection."""
        return await fetch_pinboard_bookmarks(self.auth_token, self.endpoint)

    def convert(self, bookmarks: List[PinboardBookmark]) -> ConversionResults:
        """Transform and partition bookmarks, then print the summary lines."""
        results = partition_results(transform_all(bookmarks, self.options))
        report_stats(results.succeeded_count, results.failed_count)
        self.logger.info(str(results))
        return results

    async def run_async(self, output_path: Union[str, Path]) -> ConversionResults:
        """
        Run the whole pipeline.

        Fatal errors (fetch or write) propagate; nothing is written when the
        fetch fails.
        """
        bookmarks = await self.fetch()
        results = self.convert(bookmarks)
        self.csv_handler.save_import_csv(results.succeeded, output_path)
        return results

    def run(self, output_path: Union[str, Path]) -> ConversionResults:
        """Synchronous entry point."""
        return asyncio.run(self.run_async(output_path))
