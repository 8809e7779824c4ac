# src/paybridge/adapters/__init__.py
"""
Adapters Layer - Payment Interfaces

This package contains all adapters around payment systems:
- Payments (capability, modern handler, legacy backend, adapter)
- Formatting (legacy amount format)
"""

__all__ = []
