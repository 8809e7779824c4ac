# src/paybridge/adapters/payments/__init__.py
"""
Payment Adapters - Payment Handlers and Backends

This package contains the payment capability, its implementations, and the
adapter that places a legacy backend behind it.
"""

from paybridge.adapters.payments.base import LegacyPaymentSystem, PaymentCapability
from paybridge.adapters.payments.adapter import PaymentAdapter
from paybridge.adapters.payments.legacy import ConsoleLegacyPaymentSystem
from paybridge.adapters.payments.modern import ModernPaymentSystem

__all__ = [
    "PaymentCapability",
    "LegacyPaymentSystem",
    "PaymentAdapter",
    "ConsoleLegacyPaymentSystem",
    "ModernPaymentSystem",
]
