# src/paybridge/domain/models.py
"""
Domain Models - Payment Value Types

This module contains the value types that flow through a payment call:
- Amount (numeric value handed to modern handlers)
- FormattedAmount (two-decimal string expected by legacy backends)
- LegacyPayment (record of a payment executed by a legacy backend)

Files that USE this module:
- paybridge.adapters.formatting.formatter (Amount, FormattedAmount)
- paybridge.adapters.payments.* (handlers accept Amount)
- tests.* (tests use domain models for assertions)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Decimal  # Fixed-point amounts
from typing import Union  # Type alias for accepted numeric inputs

# Non-negative currency value; any of these is accepted by execute_payment.
Amount = Union[int, float, Decimal]

# Amount rendered with exactly two decimal places and "." as separator.
FormattedAmount = str


@dataclass(frozen=True)
class LegacyPayment:
    """
    A payment executed by a legacy backend.

    Attributes:
        formatted_amount: The exact string the backend received
        system: Name of the backend that executed the payment
    """
    formatted_amount: FormattedAmount
    system: str
