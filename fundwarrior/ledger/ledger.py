"""
Fund Ledger

The ledger is the aggregate root: it owns every fund, enforces the
consistency rules and applies mutations. It knows nothing about storage,
logging or the command line; callers load it, mutate it and hand it back
to storage.

GUARANTEES:
- Fund names are unique and every key matches its fund's name
- Insertion order is kept for stable listing output
- Every operation validates before mutating, so a failed call changes nothing
- Without allow_negative_balance, no balance ever drops below zero
"""

from decimal import Decimal
from typing import Iterable, Iterator, Optional

from fundwarrior.errors import (
    DuplicateNameError,
    InsufficientFundsError,
    NotFoundError,
)
from fundwarrior.models.fund import ZERO, Fund, LedgerDocument
from fundwarrior.validation import (
    parse_amount,
    require_in_range,
    require_non_negative,
    require_positive,
    validate_fund_name,
)
from fundwarrior.validation.validator import AmountInput


class Ledger:
    """
    In-memory collection of funds.

    Deposit and spend calls may be chained on one ledger and saved once,
    which is how a future transfer would stay atomic.
    """

    def __init__(
        self,
        funds: Optional[Iterable[Fund]] = None,
        allow_negative_balance: bool = False,
    ):
        """
        Initialize ledger.

        Args:
            funds: Existing funds in insertion order.
            allow_negative_balance: If True, spending past zero is applied
                    instead of raising InsufficientFundsError.

        Raises:
            DuplicateNameError: If two of the given funds share a name
        """
        self._funds: dict[str, Fund] = {}
        self.allow_negative_balance = allow_negative_balance
        for fund in funds or ():
            if fund.name in self._funds:
                raise DuplicateNameError(fund.name)
            self._funds[fund.name] = fund

    @classmethod
    def from_document(
        cls,
        document: LedgerDocument,
        allow_negative_balance: bool = False,
    ) -> "Ledger":
        return cls(document.funds, allow_negative_balance=allow_negative_balance)

    def to_document(self) -> LedgerDocument:
        return LedgerDocument(funds=list(self._funds.values()))

    # ─── Queries ─────────────────────────────────────────────────────────────

    def get(self, name: str) -> Fund:
        """
        Return the fund with the given name.

        Raises:
            NotFoundError: If no such fund exists
        """
        try:
            return self._funds[name]
        except KeyError:
            raise NotFoundError(name) from None

    def list_funds(self, name: Optional[str] = None) -> list[Fund]:
        """
        Return funds in insertion order.

        With a name, returns just that fund (or raises NotFoundError).
        """
        if name is not None:
            return [self.get(name)]
        return list(self._funds.values())

    def names(self) -> list[str]:
        return list(self._funds)

    def total_balance(self) -> Decimal:
        """Sum of all balances. Informational only; nothing is capped by it."""
        return sum((fund.balance for fund in self._funds.values()), ZERO)

    def total_goal(self) -> Decimal:
        return sum((fund.goal for fund in self._funds.values()), ZERO)

    def __contains__(self, name: object) -> bool:
        return name in self._funds

    def __iter__(self) -> Iterator[Fund]:
        return iter(list(self._funds.values()))

    def __len__(self) -> int:
        return len(self._funds)

    def __repr__(self) -> str:
        return f"Ledger(funds={self.names()!r})"

    # ─── Mutations ───────────────────────────────────────────────────────────

    def create(
        self,
        name: str,
        balance: AmountInput = ZERO,
        goal: AmountInput = ZERO,
    ) -> Fund:
        """
        Add a new fund.

        Raises:
            InvalidNameError: If the name is empty or has whitespace
            InvalidAmountError: If balance or goal is negative or unparseable
            DuplicateNameError: If the name is already used
        """
        validate_fund_name(name)
        balance = require_non_negative(parse_amount(balance, "balance"), "balance")
        goal = require_non_negative(parse_amount(goal, "goal"), "goal")
        if name in self._funds:
            raise DuplicateNameError(name)

        fund = Fund(name=name, balance=balance, goal=goal)
        self._funds[name] = fund
        return fund

    def deposit(self, name: str, amount: AmountInput) -> Fund:
        """
        Add money to a fund. Going past the goal is fine.

        Raises:
            NotFoundError: If the fund does not exist
            InvalidAmountError: If amount is not strictly positive, or the
                new balance would exceed MAX_AMOUNT
        """
        fund = self.get(name)
        amount = require_positive(parse_amount(amount))
        balance = require_in_range(fund.balance + amount, "balance")

        updated = fund.with_balance(balance)
        self._funds[name] = updated
        return updated

    def spend(self, name: str, amount: AmountInput) -> Fund:
        """
        Take money out of a fund.

        Raises:
            NotFoundError: If the fund does not exist
            InvalidAmountError: If amount is not strictly positive, or the
                new balance would fall below -MAX_AMOUNT
            InsufficientFundsError: If amount exceeds the balance and
                negative balances are not allowed
        """
        fund = self.get(name)
        amount = require_positive(parse_amount(amount))
        if amount > fund.balance and not self.allow_negative_balance:
            raise InsufficientFundsError(name, fund.balance, amount)
        balance = require_in_range(fund.balance - amount, "balance")

        updated = fund.with_balance(balance)
        self._funds[name] = updated
        return updated

    def rename(self, old_name: str, new_name: str) -> Fund:
        """
        Rename a fund, keeping its balance, goal and position.

        Raises:
            NotFoundError: If old_name does not exist
            InvalidNameError: If new_name is not a valid name
            DuplicateNameError: If new_name is already used
        """
        fund = self.get(old_name)
        validate_fund_name(new_name)
        if new_name == old_name:
            return fund
        if new_name in self._funds:
            raise DuplicateNameError(new_name)

        renamed = fund.with_name(new_name)
        self._funds = {
            (new_name if key == old_name else key): (renamed if key == old_name else value)
            for key, value in self._funds.items()
        }
        return renamed
