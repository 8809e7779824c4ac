# src/paybridge/adapters/payments/legacy.py
"""
Console Legacy Payment System - Stand-in Legacy Backend

This module implements a LegacyPaymentSystem that prints each payment it
executes and keeps a record of the formatted amounts it received. It stands
in for a real legacy backend in the demonstration entry point.

When configured as offline (LEGACY_ONLINE=false) every payment fails with
LegacyBackendError, which lets the demonstration show that the adapter and
processor surface backend errors unchanged.

Files that USE this module:
- paybridge.app (legacy backend wrapped by PaymentAdapter)
- tests.test_legacy (unit tests)

Files that this module USES:
- paybridge.adapters.payments.base (LegacyPaymentSystem interface)
- paybridge.config (settings for system name and availability)
- paybridge.domain (LegacyPayment record, LegacyBackendError)
"""
import logging
from typing import Callable, List, Optional

from paybridge.adapters.payments.base import LegacyPaymentSystem
from paybridge.domain.errors import LegacyBackendError
from paybridge.domain.models import FormattedAmount, LegacyPayment

log = logging.getLogger(__name__)


class ConsoleLegacyPaymentSystem(LegacyPaymentSystem):
    def __init__(
        self,
        name: Optional[str] = None,
        online: Optional[bool] = None,
        output: Callable[[str], None] = print,
    ):
        """
        Initialize the console legacy backend.

        Args:
            name: Optional system name (defaults to settings.legacy_system_name)
            online: Optional availability flag (defaults to settings.legacy_online)
            output: Callable receiving the confirmation line (defaults to print)
        """
        from paybridge.config import settings

        self.name = name or settings.legacy_system_name
        self.online = settings.legacy_online if online is None else online
        self.output = output
        self.payments: List[LegacyPayment] = []

    def make_payment(self, formatted_amount: FormattedAmount) -> None:
        """
        Execute a payment for a pre-formatted amount.

        Args:
            formatted_amount: Amount string such as "200.00"

        Raises:
            LegacyBackendError: If the backend is offline
        """
        if not self.online:
            log.error("%s is offline, rejecting payment of %s", self.name, formatted_amount)
            raise LegacyBackendError(f"{self.name} is offline; payment of {formatted_amount} not executed")

        self.payments.append(LegacyPayment(formatted_amount=formatted_amount, system=self.name))
        log.info("%s executed payment: %s", self.name, formatted_amount)
        self.output(f"Legacy system executing payment of: {formatted_amount}")
