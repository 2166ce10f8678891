"""
Input validation utilities for the Pinboard to Raindrop.io converter.

This module provides validation functions for command-line arguments
and other user inputs.
"""

import os
from pathlib import Path
from typing import Optional, Union

from pinboard_to_raindrop.utils.error_handler import ValidationError


def validate_output_file(file_path: Union[str, Path, None]) -> Path:
    """
    Validate that output file path is writable.

    Args:
        file_path: Path to the output CSV file

    Returns:
        Validated Path object

    Raises:
        ValidationError: If path isn't writable or parent can't be created
    """
    if not file_path:
        raise ValidationError("Output file is required (use --output/-o)")

    path = Path(file_path)

    if path.is_dir():
        raise ValidationError(f"Output path is a directory: {file_path}")

    # Check if parent directory exists
    parent = path.parent
    if not parent.exists():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ValidationError(f"Cannot create output directory: {parent}: {e}")

    # Check if we can write to the directory
    if not os.access(parent, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {parent}")

    # Check if file exists and is writable
    if path.exists() and not os.access(path, os.W_OK):
        raise ValidationError(f"Output file exists and is not writable: {file_path}")

    return path.absolute()


def validate_config_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate configuration file if provided.

    Args:
        file_path: Path to the config file or None

    Returns:
        Validated Path object or None

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Configuration path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Configuration file is not readable: {file_path}")

    if path.suffix.lower() not in [".toml", ".json"]:
        raise ValidationError(
            f"Configuration file must be a .toml or .json file, got: {path.suffix}"
        )

    return path.absolute()


def validate_folder_name(folder: Optional[str]) -> str:
    """
    Validate the destination Raindrop.io folder name.

    Raises:
        ValidationError: If the folder name is blank
    """
    if folder is None or not folder.strip():
        raise ValidationError("Raindrop folder name cannot be empty")
    return folder
