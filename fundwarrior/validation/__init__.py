"""Input validation package."""

from fundwarrior.validation.validator import (
    parse_amount,
    require_in_range,
    require_non_negative,
    require_positive,
    validate_fund_name,
)

__all__ = [
    "parse_amount",
    "require_in_range",
    "require_non_negative",
    "require_positive",
    "validate_fund_name",
]
