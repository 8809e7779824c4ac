# src/paybridge/adapters/payments/modern.py
"""
Modern Payment System - Native PaymentCapability Implementation

Files that USE this module:
- paybridge.app (first payment of the demonstration)
- tests.test_payment_processor (substitutability tests)

Files that this module USES:
- paybridge.adapters.payments.base (PaymentCapability)
"""
import logging
from typing import Callable

from paybridge.adapters.payments.base import PaymentCapability
from paybridge.domain.models import Amount

log = logging.getLogger(__name__)


class ModernPaymentSystem(PaymentCapability):
    """Handler that accepts numeric amounts directly and prints a confirmation."""

    def __init__(self, output: Callable[[str], None] = print):
        self.output = output

    def execute_payment(self, amount: Amount) -> None:
        log.info("Modern system executing payment: %s", amount)
        self.output(f"Payment executed by the modern system in the amount of: {amount}")
