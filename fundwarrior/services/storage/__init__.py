"""
Storage Services Package

Provides the abstract persistence contract and its implementations.
The JSON file backend is used by the command line; the in-memory
backend is for tests.
"""

from fundwarrior.services.storage.interface import (
    CorruptLedgerError,
    LedgerStorageInterface,
    LockTimeoutError,
    PersistenceError,
)
from fundwarrior.services.storage.json_file import JsonFileLedgerStorage
from fundwarrior.services.storage.memory import InMemoryLedgerStorage

__all__ = [
    # Interfaces
    "LedgerStorageInterface",
    # Exceptions
    "CorruptLedgerError",
    "LockTimeoutError",
    "PersistenceError",
    # Implementations
    "InMemoryLedgerStorage",
    "JsonFileLedgerStorage",
]
