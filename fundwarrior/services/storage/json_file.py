"""
JSON File Storage Implementation

DESIGN DECISION: The ledger is one small JSON document on local disk:
1. Users can read and back it up with ordinary tools
2. No database setup required
3. Funds are stored as an ordered list, so listing order survives

Writes go to a temporary file in the same directory which is then
os.replace()d over the real file, so a crash mid-write leaves the old
ledger intact. A sibling ".lock" file serializes load-mutate-save cycles
between concurrent invocations.
"""

import contextlib
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from filelock import FileLock, Timeout
from pydantic import ValidationError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from fundwarrior.config import FundSettings
from fundwarrior.ledger import Ledger
from fundwarrior.models.fund import LedgerDocument
from fundwarrior.services.storage.interface import (
    CorruptLedgerError,
    LedgerStorageInterface,
    LockTimeoutError,
    PersistenceError,
)


class JsonFileLedgerStorage(LedgerStorageInterface):
    """
    Stores the ledger as a JSON LedgerDocument.

    A missing or empty file is a first run and loads as an empty ledger.
    """

    def __init__(
        self,
        path: Union[str, Path],
        lock_timeout_seconds: float = 0.5,
        lock_attempts: int = 5,
    ):
        self._path = Path(path)
        self._lock_path = self._path.with_name(self._path.name + ".lock")
        self._lock_timeout_seconds = lock_timeout_seconds
        self._lock_attempts = lock_attempts

    @classmethod
    def from_settings(cls, settings: FundSettings) -> "JsonFileLedgerStorage":
        return cls(
            settings.fund_file,
            lock_timeout_seconds=settings.lock_timeout_seconds,
            lock_attempts=settings.lock_attempts,
        )

    @property
    def path(self) -> Path:
        return self._path

    @property
    def lock_path(self) -> Path:
        return self._lock_path

    @property
    def location(self) -> str:
        return str(self._path)

    def load(self, allow_negative_balance: bool = False) -> Ledger:
        if not self._path.exists():
            return Ledger(allow_negative_balance=allow_negative_balance)

        try:
            raw = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CorruptLedgerError(
                f"{self._path} is not a valid fund file: {e}"
            ) from e
        except OSError as e:
            raise PersistenceError(f"Could not read {self._path}: {e}") from e

        if not raw.strip():
            return Ledger(allow_negative_balance=allow_negative_balance)

        try:
            document = LedgerDocument.model_validate_json(raw)
        except ValidationError as e:
            raise CorruptLedgerError(
                f"{self._path} is not a valid fund file: {e}"
            ) from e

        return Ledger.from_document(
            document,
            allow_negative_balance=allow_negative_balance,
        )

    def save(self, ledger: Ledger) -> None:
        payload = ledger.to_document().model_dump_json(indent=2) + "\n"

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=self._path.parent,
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_name, self._path)
            except BaseException:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise PersistenceError(f"Could not write {self._path}: {e}") from e

    @contextmanager
    def lock(self) -> Iterator["JsonFileLedgerStorage"]:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(
                f"Could not create {self._path.parent}: {e}"
            ) from e

        file_lock = FileLock(str(self._lock_path))
        self._acquire(file_lock)
        try:
            yield self
        finally:
            file_lock.release()

    def _acquire(self, file_lock: FileLock) -> None:
        """Try to take the lock, backing off between attempts."""
        retryer = Retrying(
            stop=stop_after_attempt(self._lock_attempts),
            wait=wait_exponential(multiplier=0.1, max=2),
            retry=retry_if_exception_type(Timeout),
            reraise=True,
        )
        try:
            retryer(file_lock.acquire, timeout=self._lock_timeout_seconds)
        except Timeout as e:
            raise LockTimeoutError(
                f"Could not lock {self._path}: another fund command is running"
            ) from e
        except OSError as e:
            raise PersistenceError(f"Could not lock {self._path}: {e}") from e
