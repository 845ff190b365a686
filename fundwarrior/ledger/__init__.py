"""Fund ledger package."""

from fundwarrior.ledger.ledger import Ledger

__all__ = ["Ledger"]
