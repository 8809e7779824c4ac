# src/paybridge/adapters/formatting/formatter.py
"""
Amount Formatter - Legacy Amount Formatting

This module renders numeric amounts in the string format legacy payment
backends expect: exactly two decimal places, "." as the decimal separator,
no grouping separators.

Rounding is ROUND_HALF_UP applied to the shortest decimal representation of
the input (``Decimal(str(amount))``), so 19.999 becomes "20.00" and 2.675
becomes "2.68" even though the binary float for 2.675 sits just below it.

Files that USE this module:
- paybridge.adapters.payments.adapter (PaymentAdapter formats before delegating)
- tests.test_formatter (unit tests)

Files that this module USES:
- paybridge.domain.models (Amount, FormattedAmount type aliases)
- paybridge.domain.errors (InvalidAmountError for non-finite input)
"""
from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_UP

from paybridge.domain.errors import InvalidAmountError
from paybridge.domain.models import Amount, FormattedAmount

_TWO_PLACES = Decimal("0.01")
_MIN_PRECISION = 28


def to_decimal(amount: Amount) -> Decimal:
    """
    Convert a numeric amount to Decimal via its string form.

    Args:
        amount: int, float or Decimal amount

    Returns:
        Decimal equal to the amount's shortest decimal representation

    Raises:
        InvalidAmountError: If the amount is NaN or infinite
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    if not value.is_finite():
        raise InvalidAmountError(f"Amount has no two-decimal representation: {amount!r}")
    return value


def format_amount(amount: Amount) -> FormattedAmount:
    """
    Format an amount with exactly two decimal places (ROUND_HALF_UP).

    Args:
        amount: int, float or Decimal amount

    Returns:
        String such as "150.00"

    Raises:
        InvalidAmountError: If the amount is NaN or infinite
    """
    value = to_decimal(amount)
    # integer digits, a rounding carry and two places; independent of the caller's context
    context = Context(prec=max(_MIN_PRECISION, value.adjusted() + 4), rounding=ROUND_HALF_UP)
    rounded = value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP, context=context)
    # "f" keeps large values out of scientific notation
    return f"{rounded:f}"
