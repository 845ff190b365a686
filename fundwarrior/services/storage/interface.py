"""
Abstract Storage Interface

DESIGN DECISION: The ledger never touches the filesystem itself.
Storage is a collaborator with three operations:
1. load() - read the ledger, or an empty one on first run
2. save() - replace the stored ledger in full
3. lock() - exclusive access for one load-mutate-save cycle

This allows us to:
1. Keep ledger logic testable without touching disk
2. Use in-memory storage for testing
3. Swap the JSON file for another format later
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from fundwarrior.ledger import Ledger


class LedgerStorageInterface(ABC):
    """
    Abstract interface for ledger persistence.

    Any storage implementation must implement these methods.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the ledger lives."""
        pass

    @abstractmethod
    def load(self, allow_negative_balance: bool = False) -> Ledger:
        """
        Load the stored ledger.

        Args:
            allow_negative_balance: Spend policy for the returned ledger

        Returns:
            The stored ledger, or an empty one if nothing was stored yet

        Raises:
            CorruptLedgerError: If stored data cannot be parsed
            PersistenceError: If storage cannot be read
        """
        pass

    @abstractmethod
    def save(self, ledger: Ledger) -> None:
        """
        Replace stored content with the given ledger.

        The write must be atomic: readers see either the old or the new
        ledger, never a partial one.

        Raises:
            PersistenceError: If the write fails
        """
        pass

    @abstractmethod
    def lock(self) -> AbstractContextManager:
        """
        Exclusive access across processes.

        Acquire before load, release after save. Released on every exit
        path, including exceptions.

        Raises:
            LockTimeoutError: If the lock cannot be acquired
        """
        pass


class PersistenceError(Exception):
    """Base exception for storage operations."""
    pass


class CorruptLedgerError(PersistenceError):
    """Stored ledger exists but is not a valid ledger."""
    pass


class LockTimeoutError(PersistenceError):
    """Another process is holding the ledger lock."""
    pass
