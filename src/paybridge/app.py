# src/paybridge/app.py
"""
Application Entry Point - Payment Demonstration

This module serves as the composition root for PayBridge. It wires the
payment handlers and runs two payments through the same PaymentProcessor:
one through the modern system and one through the legacy backend wrapped by
PaymentAdapter.

Payment errors are not handled here: a failing legacy backend terminates the
process with its own exception.

Files that USE this module:
- paybridge.__main__ (python -m paybridge)
- paybridge console script

Files that this module USES:
- paybridge.shared.logging_conf (setup_logging for logging configuration)
- paybridge.config (settings for demo amounts and logging)
- paybridge.application.payment_processor (PaymentProcessor)
- paybridge.adapters.payments (ModernPaymentSystem, ConsoleLegacyPaymentSystem, PaymentAdapter)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages

from paybridge.shared.logging_conf import setup_logging  # Configure logging with file rotation
from paybridge.application.payment_processor import PaymentProcessor  # Capability dispatch
from paybridge.adapters.payments import (
    ConsoleLegacyPaymentSystem,  # Stand-in legacy backend
    ModernPaymentSystem,  # Native capability implementation
    PaymentAdapter,  # Legacy backend behind the capability
)


def main() -> None:
    """
    Run the payment demonstration.

    This function:
    1. Sets up logging from settings
    2. Processes the modern demo amount through ModernPaymentSystem
    3. Processes the legacy demo amount through PaymentAdapter(ConsoleLegacyPaymentSystem)
    """
    from paybridge.config import settings

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)

    processor = PaymentProcessor()

    modern_payment = ModernPaymentSystem()
    processor.process_payment(modern_payment, settings.modern_demo_amount)

    legacy_system = ConsoleLegacyPaymentSystem()
    legacy_payment = PaymentAdapter(legacy_system)
    processor.process_payment(legacy_payment, settings.legacy_demo_amount)

    logger.info("Demonstration finished: %d legacy payment(s) executed", len(legacy_system.payments))


if __name__ == "__main__":
    main()
