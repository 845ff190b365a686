"""
Input Validation

Names and amounts arrive from the command line as text. They are checked
here before the ledger is touched, so a rejected command never leaves a
partial mutation behind.

IMPORTANT: Validation NEVER silently fixes input. "12.5" is rejected
rather than read as 12.50, and "1250" is rejected rather than read as cents.
"""

import re
from decimal import Decimal
from typing import Union

from fundwarrior.errors import InvalidAmountError, InvalidNameError
from fundwarrior.models.fund import CENT, MAX_AMOUNT


AMOUNT_PATTERN = re.compile(r"^[+-]?\d+\.\d{2}$")

AmountInput = Union[str, Decimal, int]


def validate_fund_name(name: str) -> str:
    """
    Check a fund name.

    Names are case-sensitive and must be a single non-empty word.

    Raises:
        InvalidNameError: If the name is empty or contains whitespace
    """
    if not isinstance(name, str) or not name:
        raise InvalidNameError("fund name must not be empty")
    if any(ch.isspace() for ch in name):
        raise InvalidNameError(f"fund name '{name}' must not contain whitespace")
    return name


def parse_amount(value: AmountInput, field: str = "amount") -> Decimal:
    """
    Convert user input to an exact cents-precision Decimal.

    Text must look like conventional currency notation with exactly two
    fractional digits ("100.00"). Decimal and int values are accepted as-is
    provided they have no sub-cent part. Floats are refused outright.

    The sign is preserved; use require_positive / require_non_negative
    to enforce a range. Magnitudes above MAX_AMOUNT are always refused.

    Raises:
        InvalidAmountError: If the value cannot be read as money
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidAmountError(
            f"{field} must be given as decimal text or Decimal, not {type(value).__name__}"
        )

    if isinstance(value, str):
        text = value.strip()
        if not AMOUNT_PATTERN.match(text):
            raise InvalidAmountError(
                f"{field} '{value}' is not a valid amount "
                "(expected digits with two decimal places, e.g. 100.00)"
            )
        return require_in_range(Decimal(text), field)

    if isinstance(value, int):
        return require_in_range(Decimal(value), field).quantize(CENT)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidAmountError(f"{field} must be a finite number")
        require_in_range(value, field)
        quantized = value.quantize(CENT)
        if quantized != value:
            raise InvalidAmountError(
                f"{field} {value} has more than two decimal places"
            )
        return quantized

    raise InvalidAmountError(f"{field} has unsupported type {type(value).__name__}")


def require_in_range(amount: Decimal, field: str = "amount") -> Decimal:
    """Reject amounts whose magnitude exceeds MAX_AMOUNT."""
    if abs(amount) > MAX_AMOUNT:
        raise InvalidAmountError(
            f"{field} {amount} is out of range (largest supported is {MAX_AMOUNT})"
        )
    return amount


def require_non_negative(amount: Decimal, field: str = "amount") -> Decimal:
    """Reject amounts below zero."""
    if amount < 0:
        raise InvalidAmountError(f"{field} must not be negative (got {amount})")
    return amount


def require_positive(amount: Decimal, field: str = "amount") -> Decimal:
    """Reject zero and negative amounts."""
    if amount <= 0:
        raise InvalidAmountError(f"{field} must be greater than zero (got {amount})")
    return amount
