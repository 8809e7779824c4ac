# src/paybridge/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from paybridge.shared.validators import (
    validate_log_level,
    validate_system_name,
)
from paybridge.shared.logging_conf import setup_logging

__all__ = [
    "validate_log_level",
    "validate_system_name",
    "setup_logging",
]
