"""
Event Models for FundWarrior

Every ledger mutation and every rejected command is described by a
LedgerEvent. Events are written to the structured log only; FundWarrior
keeps no persisted history.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class LedgerEventType(str, Enum):
    """Types of events the ledger reports."""
    # Fund mutations
    FUND_CREATED = "fund_created"
    FUND_DEPOSITED = "fund_deposited"
    FUND_SPENT = "fund_spent"
    FUND_OVERDRAWN = "fund_overdrawn"
    FUND_RENAMED = "fund_renamed"

    # Persistence
    LEDGER_LOADED = "ledger_loaded"
    LEDGER_SAVED = "ledger_saved"
    PERSISTENCE_FAILED = "persistence_failed"

    # Commands
    COMMAND_REJECTED = "command_rejected"


class EventSeverity(str, Enum):
    """Severity level for ledger events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LedgerEvent(BaseModel):
    """A single thing that happened to the ledger."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: LedgerEventType = Field(
        ...,
        description="Type of event"
    )
    severity: EventSeverity = Field(
        default=EventSeverity.INFO,
        description="Event severity"
    )

    fund_name: Optional[str] = Field(
        default=None,
        description="Fund the event is about, if any"
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Ties together all events of one command invocation"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "fund_name": self.fund_name,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


class LedgerEventBuilder:
    """
    Helper class to build ledger events with common patterns.

    Usage:
        event = LedgerEventBuilder.fund_created(fund_name, balance, goal)
        event = LedgerEventBuilder.command_rejected("spend", error)
    """

    @staticmethod
    def fund_created(
        fund_name: str,
        balance: Decimal,
        goal: Decimal,
        correlation_id: Optional[UUID] = None
    ) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.FUND_CREATED,
            fund_name=fund_name,
            correlation_id=correlation_id,
            description=f"Fund created: {fund_name}",
            details={
                "balance": str(balance),
                "goal": str(goal),
            },
        )

    @staticmethod
    def fund_deposited(
        fund_name: str,
        amount: Decimal,
        new_balance: Decimal,
        correlation_id: Optional[UUID] = None
    ) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.FUND_DEPOSITED,
            fund_name=fund_name,
            correlation_id=correlation_id,
            description=f"Deposited {amount} into {fund_name}",
            details={
                "amount": str(amount),
                "balance": str(new_balance),
            },
        )

    @staticmethod
    def fund_spent(
        fund_name: str,
        amount: Decimal,
        new_balance: Decimal,
        correlation_id: Optional[UUID] = None
    ) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.FUND_SPENT,
            fund_name=fund_name,
            correlation_id=correlation_id,
            description=f"Spent {amount} from {fund_name}",
            details={
                "amount": str(amount),
                "balance": str(new_balance),
            },
        )

    @staticmethod
    def fund_overdrawn(
        fund_name: str,
        amount: Decimal,
        new_balance: Decimal,
        correlation_id: Optional[UUID] = None
    ) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.FUND_OVERDRAWN,
            severity=EventSeverity.WARNING,
            fund_name=fund_name,
            correlation_id=correlation_id,
            description=f"Fund {fund_name} overdrawn to {new_balance}",
            details={
                "amount": str(amount),
                "balance": str(new_balance),
            },
        )

    @staticmethod
    def fund_renamed(
        old_name: str,
        new_name: str,
        correlation_id: Optional[UUID] = None
    ) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.FUND_RENAMED,
            fund_name=new_name,
            correlation_id=correlation_id,
            description=f"Fund renamed: {old_name} -> {new_name}",
            details={
                "old_name": old_name,
                "new_name": new_name,
            },
        )

    @staticmethod
    def ledger_loaded(
        location: str,
        fund_count: int,
        correlation_id: Optional[UUID] = None
    ) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.LEDGER_LOADED,
            severity=EventSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Loaded {fund_count} funds",
            details={
                "location": location,
                "fund_count": fund_count,
            },
        )

    @staticmethod
    def ledger_saved(
        location: str,
        fund_count: int,
        correlation_id: Optional[UUID] = None
    ) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.LEDGER_SAVED,
            correlation_id=correlation_id,
            description=f"Saved {fund_count} funds",
            details={
                "location": location,
                "fund_count": fund_count,
            },
        )

    @staticmethod
    def persistence_failed(
        error_type: str,
        error_message: str,
        correlation_id: Optional[UUID] = None
    ) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.PERSISTENCE_FAILED,
            severity=EventSeverity.ERROR,
            correlation_id=correlation_id,
            description=f"Persistence error: {error_type}",
            error_code=error_type,
            error_message=error_message,
        )

    @staticmethod
    def command_rejected(
        command: str,
        error_type: str,
        error_message: str,
        fund_name: Optional[str] = None,
        correlation_id: Optional[UUID] = None
    ) -> LedgerEvent:
        return LedgerEvent(
            event_type=LedgerEventType.COMMAND_REJECTED,
            severity=EventSeverity.WARNING,
            fund_name=fund_name,
            correlation_id=correlation_id,
            description=f"Command rejected: {command}",
            details={
                "command": command,
            },
            error_code=error_type,
            error_message=error_message,
        )
