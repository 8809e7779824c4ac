# src/paybridge/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

Diagnostics go to stdout and/or a rotating log file. When both are disabled
they go to stderr, leaving stdout to the payment confirmation lines.

Files that USE this module:
- paybridge.app (setup_logging function for logging initialization)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_stdout: Optional[bool] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level, as int or level name such as "DEBUG"
        log_file: Optional path of a rotating log file
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)
        log_to_stdout: Whether to log to stdout (defaults to PAYBRIDGE_LOG_STDOUT env var)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if log_to_stdout is None:
        log_to_stdout = os.environ.get("PAYBRIDGE_LOG_STDOUT", "true").lower() == "true"

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []

    if log_to_stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )

    if not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(formatter)

    # force: replace handlers left by an earlier call
    logging.basicConfig(level=level, handlers=handlers, force=True)

    logging.getLogger(__name__).info(
        "Logging configured: file=%s, level=%s", log_file or "-", logging.getLevelName(level)
    )
