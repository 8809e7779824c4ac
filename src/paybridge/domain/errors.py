# src/paybridge/domain/errors.py
"""
Domain Errors - Payment Exceptions

This module defines the exceptions raised by payment handlers and backends.
"""


class PaymentError(Exception):
    """Base exception for payment errors."""
    pass


class LegacyBackendError(PaymentError):
    """Raised by a legacy payment backend when it cannot execute a payment."""
    pass


class InvalidAmountError(PaymentError, ValueError):
    """Raised when an amount has no two-decimal representation (NaN, infinity)."""
    pass
