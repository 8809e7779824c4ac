# src/paybridge/adapters/payments/adapter.py
"""
Payment Adapter - Legacy Backend behind the Modern Capability

This module adapts a LegacyPaymentSystem to the PaymentCapability interface.
The adapter only translates the amount (numeric -> two-decimal string) and
delegates; it holds no state besides the wrapped backend and never catches
errors raised by it.

Files that USE this module:
- paybridge.app (wraps the demo legacy backend)
- tests.test_adapter (unit tests)

Files that this module USES:
- paybridge.adapters.payments.base (PaymentCapability, LegacyPaymentSystem)
- paybridge.adapters.formatting.formatter (format_amount)
"""
import logging

from paybridge.adapters.formatting.formatter import format_amount
from paybridge.adapters.payments.base import LegacyPaymentSystem, PaymentCapability
from paybridge.domain.models import Amount

log = logging.getLogger(__name__)


class PaymentAdapter(PaymentCapability):
    def __init__(self, legacy_system: LegacyPaymentSystem):
        """
        Initialize the adapter.

        Args:
            legacy_system: Legacy backend that receives the formatted amount
        """
        self.legacy_system = legacy_system

    def execute_payment(self, amount: Amount) -> None:
        """
        Format the amount to two decimal places and forward it to the legacy backend.

        Args:
            amount: Non-negative numeric amount

        Raises:
            InvalidAmountError: If the amount is NaN or infinite
            Whatever the legacy backend raises, unchanged
        """
        formatted = format_amount(amount)
        log.debug("Translated amount %r -> %r for legacy backend", amount, formatted)
        self.legacy_system.make_payment(formatted)
