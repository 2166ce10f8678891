"""
CSV handling module for the Raindrop.io import format.

This module writes 6-column Raindrop.io import CSV files from converted
Pinboard bookmarks.
"""

import csv
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from .data_models import RaindropBookmark
from ..utils.error_handler import CSVWriteError


class RaindropCSVHandler:
    """Handles the Raindrop.io import CSV format."""

    # Raindrop.io import format (6 columns)
    IMPORT_COLUMNS = RaindropBookmark.IMPORT_COLUMNS

    def __init__(self):
        """Initialize the CSV handler."""
        self.logger = logging.getLogger(__name__)
        self.import_columns = self.IMPORT_COLUMNS

    def bookmarks_to_dataframe(self, bookmarks: List[RaindropBookmark]) -> pd.DataFrame:
        """
        Convert bookmarks to a DataFrame for export.

        Args:
            bookmarks: Converted bookmarks in output order

        Returns:
            DataFrame in Raindrop.io import format
        """
        if not bookmarks:
            # Return empty DataFrame with correct columns
            return pd.DataFrame(columns=self.IMPORT_COLUMNS)

        df = pd.DataFrame(
            [bookmark.to_import_dict() for bookmark in bookmarks], dtype=str
        )

        # Ensure column order matches import format
        return df[self.IMPORT_COLUMNS]

    def save_import_csv(
        self, bookmarks: List[RaindropBookmark], file_path: Union[str, Path]
    ) -> Path:
        """
        Save bookmarks as a Raindrop.io import CSV file.

        An existing file is overwritten. With no bookmarks, only the header
        row is written.

        Args:
            bookmarks: Converted bookmarks
            file_path: Path to save the CSV file

        Returns:
            Path of the written file

        Raises:
            CSVWriteError: If the file cannot be opened, written or flushed
        """
        path = Path(file_path)
        df = self.bookmarks_to_dataframe(bookmarks)

        try:
            df.to_csv(
                path,
                index=False,
                encoding="utf-8",
                quoting=csv.QUOTE_ALL,
                na_rep="",
            )
        except Exception as e:
            raise CSVWriteError(f"Failed to save CSV file {path}: {e}") from e

        self.logger.info(f"Saved {len(df)} bookmarks to {path}")
        return path
