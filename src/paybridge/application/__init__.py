# src/paybridge/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that drive payment handlers
through the PaymentCapability interface.
"""

from paybridge.application.payment_processor import PaymentProcessor

__all__ = [
    "PaymentProcessor",
]
