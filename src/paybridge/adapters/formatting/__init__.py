# src/paybridge/adapters/formatting/__init__.py
"""
Formatting Adapters - Amount Formatting

This package contains the amount formatting used by legacy backend adapters.
"""

from paybridge.adapters.formatting.formatter import (
    format_amount,
    to_decimal,
)

__all__ = [
    "format_amount",
    "to_decimal",
]
