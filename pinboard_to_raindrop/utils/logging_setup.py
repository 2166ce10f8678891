"""
Logging configuration for the Pinboard to Raindrop.io converter.

This module sets up logging based on configuration settings.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    config=None, verbose: bool = False, log_file: Optional[str] = None
) -> Optional[Path]:
    """
    Set up logging configuration.

    The console handler writes to stderr so that stdout only carries the
    conversion summary.

    Args:
        config: Configuration object (its ``logging`` section is used)
        verbose: Show DEBUG messages on the console
        log_file: Optional log file name override

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    settings = config.config.logging if config is not None else None

    log_level = settings.log_level if settings else "INFO"
    log_to_file = settings.log_to_file if settings else False
    log_dir = Path(settings.log_dir) if settings else Path("logs")

    if log_file is None:
        log_file = "pinboard_to_raindrop.log"

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []
    log_path = None

    # File handler
    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = log_dir / f"{Path(log_file).stem}_{timestamp}.log"

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(getattr(logging, log_level.upper()))
        handlers.append(file_handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handlers.append(console_handler)

    # Configure root logger
    root_level = logging.DEBUG if verbose else getattr(logging, log_level.upper())
    logging.basicConfig(level=root_level, handlers=handlers, force=True)

    logger = logging.getLogger(__name__)
    if log_path:
        logger.info(f"Pinboard to Raindrop starting - Log file: {log_path}")
    logger.debug(f"Log level: {logging.getLevelName(root_level)}")

    # Reduce noise from the HTTP stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return log_path
