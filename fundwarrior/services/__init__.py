"""Services package."""

from fundwarrior.services.storage import (
    CorruptLedgerError,
    InMemoryLedgerStorage,
    JsonFileLedgerStorage,
    LedgerStorageInterface,
    LockTimeoutError,
    PersistenceError,
)

__all__ = [
    "CorruptLedgerError",
    "InMemoryLedgerStorage",
    "JsonFileLedgerStorage",
    "LedgerStorageInterface",
    "LockTimeoutError",
    "PersistenceError",
]
