"""
Command Orchestrator for FundWarrior

Ties the ledger, storage and event logging together. Each command is one
session:

1. Lock   → take the exclusive lock on the fund file
2. Load   → read the ledger (empty on first run)
3. Mutate → apply exactly one ledger operation
4. Save   → write the ledger back atomically
5. Unlock → always, even when a step above failed

DESIGN DECISION: If the mutation raises, the ledger is NOT saved.
Validation happens before any mutation, so a rejected command leaves the
file exactly as it was.

Read-only commands skip the lock; the atomic replace on save means they
never see a half-written file.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from fundwarrior.config import FundSettings
from fundwarrior.errors import LedgerError
from fundwarrior.events import EventLogger
from fundwarrior.ledger import Ledger
from fundwarrior.models.fund import ZERO, Fund
from fundwarrior.services.storage import (
    JsonFileLedgerStorage,
    LedgerStorageInterface,
    PersistenceError,
)
from fundwarrior.validation import parse_amount
from fundwarrior.validation.validator import AmountInput


class CommandRunner:
    """
    Runs ledger commands against a storage backend.

    One instance per invocation. Every method either completes fully
    (mutation saved) or raises without touching storage.
    """

    def __init__(
        self,
        storage: LedgerStorageInterface,
        event_logger: Optional[EventLogger] = None,
        allow_negative_balance: bool = False,
    ):
        self._storage = storage
        self._events = event_logger or EventLogger()
        self._allow_negative_balance = allow_negative_balance

    @classmethod
    def from_settings(
        cls,
        settings: FundSettings,
        event_logger: Optional[EventLogger] = None,
    ) -> "CommandRunner":
        return cls(
            storage=JsonFileLedgerStorage.from_settings(settings),
            event_logger=event_logger,
            allow_negative_balance=settings.allow_negative_balance,
        )

    @property
    def storage(self) -> LedgerStorageInterface:
        return self._storage

    @contextmanager
    def session(self) -> Iterator[Ledger]:
        """
        Locked load-mutate-save cycle.

        The ledger is saved only if the body completes without raising.
        Several mutations may be applied inside one session; they are
        written together.
        """
        with self._storage.lock():
            ledger = self._load()
            yield ledger
            self._storage.save(ledger)
            self._events.log_saved(self._storage.location, len(ledger))

    @contextmanager
    def _reporting(self, command: str, fund_name: Optional[str] = None) -> Iterator[None]:
        """Log failures of a command, then let them propagate."""
        try:
            yield
        except LedgerError as e:
            self._events.log_command_rejected(command, e, fund_name=fund_name)
            raise
        except PersistenceError as e:
            self._events.log_persistence_failed(e)
            raise

    def _load(self) -> Ledger:
        ledger = self._storage.load(allow_negative_balance=self._allow_negative_balance)
        self._events.log_loaded(self._storage.location, len(ledger))
        return ledger

    # ─── Commands ────────────────────────────────────────────────────────────

    def list_funds(self, name: Optional[str] = None) -> list[Fund]:
        """All funds in insertion order, or just the named one."""
        with self._reporting("list", fund_name=name):
            return self._load().list_funds(name)

    def create(
        self,
        name: str,
        balance: AmountInput = ZERO,
        goal: AmountInput = ZERO,
    ) -> Fund:
        with self._reporting("new", fund_name=name):
            with self.session() as ledger:
                fund = ledger.create(name, balance, goal)
        self._events.log_fund_created(fund)
        return fund

    def deposit(self, name: str, amount: AmountInput) -> Fund:
        with self._reporting("deposit", fund_name=name):
            amount = parse_amount(amount)
            with self.session() as ledger:
                fund = ledger.deposit(name, amount)
        self._events.log_deposit(fund, amount)
        return fund

    def spend(self, name: str, amount: AmountInput) -> Fund:
        with self._reporting("spend", fund_name=name):
            amount = parse_amount(amount)
            with self.session() as ledger:
                fund = ledger.spend(name, amount)
        self._events.log_spend(fund, amount)
        return fund

    def rename(self, old_name: str, new_name: str) -> Fund:
        with self._reporting("rename", fund_name=old_name):
            with self.session() as ledger:
                fund = ledger.rename(old_name, new_name)
        self._events.log_rename(old_name, new_name)
        return fund
