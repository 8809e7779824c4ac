# src/paybridge/shared/validators.py
"""
Configuration Validation Utilities

This module provides validation functions for configuration values loaded
from the environment: log levels and backend system names.

Files that USE this module:
- paybridge.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
import logging
import re

_SYSTEM_NAME_RE = re.compile(r'^[A-Za-z0-9][A-Za-z0-9_.\-]{0,63}$')


def validate_log_level(level: str) -> bool:
    """
    Validate a logging level name.

    Args:
        level: Level name such as "INFO" or "debug"

    Returns:
        True if logging knows the level, False otherwise
    """
    if not level:
        return False
    return isinstance(logging.getLevelName(level.upper()), int)


def validate_system_name(name: str) -> bool:
    """
    Validate a backend system name.

    Names start with a letter or digit and may contain letters, digits,
    underscores, dots and hyphens (max 64 characters).

    Args:
        name: System name to validate

    Returns:
        True if valid, False otherwise
    """
    if not name:
        return False
    return bool(_SYSTEM_NAME_RE.match(name))
