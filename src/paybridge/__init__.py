# src/paybridge/__init__.py
"""
PayBridge - Legacy Payment Adapter

Wraps a legacy payment backend that only accepts pre-formatted string amounts
so it can be driven through the same payment capability as modern handlers.
"""

__version__ = "1.0.0"
