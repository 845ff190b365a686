"""
Event Logger

Every ledger mutation, load, save and rejected command is logged as a
structured event. Logs go to stderr so they never mix with command output.

The logger:
- Emits each LedgerEvent at the level matching its severity
- Supports correlation IDs to tie together the events of one invocation
- Writes JSON by default, or a human-friendly console format
"""

import logging
import sys
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

import structlog

from fundwarrior.models.event import EventSeverity, LedgerEvent, LedgerEventBuilder
from fundwarrior.models.fund import Fund


def configure_logging(level: str = "WARNING", log_format: str = "json") -> None:
    """
    Configure stdlib logging and structlog for the command line.

    Safe to call more than once; the last call wins.
    """
    logging.basicConfig(
        stream=sys.stderr,
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


class EventLogger:
    """
    Central event logging service.

    Holds the correlation ID of the current invocation so callers do not
    have to pass it around.
    """

    def __init__(
        self,
        correlation_id: Optional[UUID] = None,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        self.correlation_id = correlation_id or create_correlation_id()
        self._logger = logger or structlog.get_logger("fundwarrior")

    def log(self, event: LedgerEvent) -> None:
        """Log a ledger event at the level its severity calls for."""
        log_dict = event.to_log_dict()

        if event.severity == EventSeverity.ERROR:
            self._logger.error("ledger_event", **log_dict)
        elif event.severity == EventSeverity.WARNING:
            self._logger.warning("ledger_event", **log_dict)
        elif event.severity == EventSeverity.DEBUG:
            self._logger.debug("ledger_event", **log_dict)
        else:
            self._logger.info("ledger_event", **log_dict)

    def log_fund_created(self, fund: Fund) -> None:
        self.log(LedgerEventBuilder.fund_created(
            fund_name=fund.name,
            balance=fund.balance,
            goal=fund.goal,
            correlation_id=self.correlation_id,
        ))

    def log_deposit(self, fund: Fund, amount: Decimal) -> None:
        self.log(LedgerEventBuilder.fund_deposited(
            fund_name=fund.name,
            amount=amount,
            new_balance=fund.balance,
            correlation_id=self.correlation_id,
        ))

    def log_spend(self, fund: Fund, amount: Decimal) -> None:
        """Log a spend, plus a warning if it left the fund below zero."""
        self.log(LedgerEventBuilder.fund_spent(
            fund_name=fund.name,
            amount=amount,
            new_balance=fund.balance,
            correlation_id=self.correlation_id,
        ))
        if fund.balance < 0:
            self.log(LedgerEventBuilder.fund_overdrawn(
                fund_name=fund.name,
                amount=amount,
                new_balance=fund.balance,
                correlation_id=self.correlation_id,
            ))

    def log_rename(self, old_name: str, new_name: str) -> None:
        self.log(LedgerEventBuilder.fund_renamed(
            old_name=old_name,
            new_name=new_name,
            correlation_id=self.correlation_id,
        ))

    def log_loaded(self, location: str, fund_count: int) -> None:
        self.log(LedgerEventBuilder.ledger_loaded(
            location=location,
            fund_count=fund_count,
            correlation_id=self.correlation_id,
        ))

    def log_saved(self, location: str, fund_count: int) -> None:
        self.log(LedgerEventBuilder.ledger_saved(
            location=location,
            fund_count=fund_count,
            correlation_id=self.correlation_id,
        ))

    def log_command_rejected(
        self,
        command: str,
        error: Exception,
        fund_name: Optional[str] = None,
    ) -> None:
        self.log(LedgerEventBuilder.command_rejected(
            command=command,
            error_type=type(error).__name__,
            error_message=str(error),
            fund_name=fund_name,
            correlation_id=self.correlation_id,
        ))

    def log_persistence_failed(self, error: Exception) -> None:
        self.log(LedgerEventBuilder.persistence_failed(
            error_type=type(error).__name__,
            error_message=str(error),
            correlation_id=self.correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for one command invocation.
    """
    return uuid4()
