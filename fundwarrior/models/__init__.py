"""
Data Models Package

This package contains all Pydantic models used in FundWarrior.
"""

from fundwarrior.models.fund import (
    CENT,
    LEDGER_FORMAT_VERSION,
    MAX_AMOUNT,
    ZERO,
    Fund,
    LedgerDocument,
)
from fundwarrior.models.event import (
    EventSeverity,
    LedgerEvent,
    LedgerEventBuilder,
    LedgerEventType,
)

__all__ = [
    # Fund models
    "CENT",
    "LEDGER_FORMAT_VERSION",
    "MAX_AMOUNT",
    "ZERO",
    "Fund",
    "LedgerDocument",
    # Event models
    "EventSeverity",
    "LedgerEvent",
    "LedgerEventBuilder",
    "LedgerEventType",
]
