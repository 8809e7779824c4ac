# src/paybridge/adapters/payments/base.py
"""
Base Payment Interfaces

This module defines the two contracts payment code is written against:
- PaymentCapability: the modern interface, taking a numeric amount
- LegacyPaymentSystem: the legacy backend interface, taking a formatted string

Files that USE this module:
- paybridge.adapters.payments.modern (ModernPaymentSystem implements PaymentCapability)
- paybridge.adapters.payments.adapter (PaymentAdapter implements PaymentCapability)
- paybridge.adapters.payments.legacy (ConsoleLegacyPaymentSystem implements LegacyPaymentSystem)
- paybridge.application.payment_processor (dispatches to PaymentCapability)

Files that this module USES:
- paybridge.domain.models (Amount, FormattedAmount type aliases)
"""
from abc import ABC, abstractmethod

from paybridge.domain.models import Amount, FormattedAmount


class PaymentCapability(ABC):
    @abstractmethod
    def execute_payment(self, amount: Amount) -> None:
        """Execute a payment for a non-negative numeric amount."""
        raise NotImplementedError


class LegacyPaymentSystem(ABC):
    @abstractmethod
    def make_payment(self, formatted_amount: FormattedAmount) -> None:
        """Execute a payment for an amount already formatted as e.g. "150.00"."""
        raise NotImplementedError
