"""Logging configuration for hlavi-tui.

Stdout belongs to the TUI, so logs only ever go to stderr (when -v is given)
or to a file.
"""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOGGER_NAME = "hlavi_tui"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_for(verbose: int) -> int:
    """Map a -v count to a logging level (0 and 1 both mean INFO)."""
    return logging.DEBUG if verbose >= 2 else logging.INFO


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> logging.Logger:
    """Configure the hlavi_tui logger.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if verbose == 0 and log_file is None:
        # Nothing requested; keep library logging quiet
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return logger

    level = level_for(verbose)
    logger.setLevel(level)

    # Repeated calls replace handlers instead of duplicating output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("=" * 60)
    logger.info(
        "hlavi-tui starting | %s | level=%s", timestamp, logging.getLevelName(level)
    )
    logger.info("=" * 60)
    return logger
