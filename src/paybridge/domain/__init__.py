# src/paybridge/domain/__init__.py
"""
Domain Layer - Pure Payment Objects

This package contains payment value types and errors.
No dependencies on infrastructure or external systems.
"""

from paybridge.domain.models import (
    Amount,
    FormattedAmount,
    LegacyPayment,
)
from paybridge.domain.errors import (
    InvalidAmountError,
    LegacyBackendError,
    PaymentError,
)

__all__ = [
    "Amount",
    "FormattedAmount",
    "LegacyPayment",
    "PaymentError",
    "LegacyBackendError",
    "InvalidAmountError",
]
