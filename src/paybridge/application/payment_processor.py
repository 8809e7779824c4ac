# src/paybridge/application/payment_processor.py
"""
Payment Processor - Capability Dispatch

This module contains the caller side of the payment capability. It knows
nothing about concrete handlers: anything with an execute_payment method can
be processed, whether it is a modern system or an adapted legacy backend.

Files that USE this module:
- paybridge.app (runs the demonstration payments)
- tests.test_payment_processor (unit tests)

Files that this module USES:
- paybridge.adapters.payments.base (PaymentCapability protocol)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Dispatch diagnostics

from paybridge.adapters.payments.base import PaymentCapability  # Modern payment contract
from paybridge.domain.models import Amount  # Numeric amount type

log = logging.getLogger(__name__)


class PaymentProcessor:
    """Dispatches payments to any PaymentCapability implementation."""

    def process_payment(self, handler: PaymentCapability, amount: Amount) -> None:
        """
        Execute a payment through the given handler.

        Args:
            handler: Object implementing execute_payment(amount)
            amount: Non-negative numeric amount

        Raises:
            Whatever the handler raises, unchanged
        """
        log.debug("Dispatching payment of %s to %s", amount, type(handler).__name__)
        handler.execute_payment(amount)
