"""
In-process memory store, for testing.

The ledger is kept as serialized JSON so that mutating a loaded ledger
never changes what is stored until save() is called.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from fundwarrior.ledger import Ledger
from fundwarrior.models.fund import LedgerDocument
from fundwarrior.services.storage.interface import (
    LedgerStorageInterface,
    LockTimeoutError,
)


class InMemoryLedgerStorage(LedgerStorageInterface):
    """
    All state is lost when the process exits.

    The lock is not re-entrant: taking it twice raises LockTimeoutError,
    which mirrors a second process finding the file locked.
    """

    def __init__(self, ledger: Optional[Ledger] = None):
        self._payload: Optional[str] = None
        self._locked = False
        self.save_count = 0
        if ledger is not None:
            self._payload = ledger.to_document().model_dump_json()

    @property
    def location(self) -> str:
        return "memory"

    @property
    def is_locked(self) -> bool:
        return self._locked

    def load(self, allow_negative_balance: bool = False) -> Ledger:
        if self._payload is None:
            return Ledger(allow_negative_balance=allow_negative_balance)
        document = LedgerDocument.model_validate_json(self._payload)
        return Ledger.from_document(
            document,
            allow_negative_balance=allow_negative_balance,
        )

    def save(self, ledger: Ledger) -> None:
        self._payload = ledger.to_document().model_dump_json()
        self.save_count += 1

    @contextmanager
    def lock(self) -> Iterator["InMemoryLedgerStorage"]:
        if self._locked:
            raise LockTimeoutError("memory ledger is already locked")
        self._locked = True
        try:
            yield self
        finally:
            self._locked = False
