"""
Core Data Models for FundWarrior

A Fund is one virtual envelope: a name, a balance and an advisory goal.
The LedgerDocument is the persisted shape of a whole ledger.

DESIGN DECISION: Money is a Decimal quantized to cents, never a float.
Repeated deposits of 0.10 must add up to exactly 0.30.

Funds are frozen. The ledger replaces a fund with an updated copy on every
mutation, so a Fund handed to a caller is always a read-only snapshot.
"""

from decimal import Decimal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# Largest magnitude a balance, goal or single amount may have. Sums of two
# such values stay well inside the default 28-digit decimal context.
MAX_AMOUNT = Decimal("999999999999999.99")

# Bump when the on-disk shape changes incompatibly
LEDGER_FORMAT_VERSION = 1


class Fund(BaseModel):
    """
    A named envelope of money.

    The balance carries no sign constraint here: whether a spend may drive it
    below zero is a ledger policy, not a property of the data.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        pattern=r"^\S+$",
        description="Case-sensitive fund name without whitespace"
    )
    balance: Decimal = Field(
        default=ZERO,
        ge=-MAX_AMOUNT,
        le=MAX_AMOUNT,
        decimal_places=2,
        description="Current amount held in the fund"
    )
    goal: Decimal = Field(
        default=ZERO,
        ge=0,
        le=MAX_AMOUNT,
        decimal_places=2,
        description="Advisory target balance"
    )

    @field_validator("balance", "goal")
    @classmethod
    def quantize_to_cents(cls, v: Decimal) -> Decimal:
        """Normalize amounts so 5 and 5.00 compare and print the same."""
        return v.quantize(CENT)

    @property
    def remaining_to_goal(self) -> Decimal:
        """How far the balance is from the goal. Negative once exceeded."""
        return self.goal - self.balance

    @property
    def goal_reached(self) -> bool:
        return self.balance >= self.goal

    def with_balance(self, balance: Decimal) -> "Fund":
        return self.model_copy(update={"balance": balance.quantize(CENT)})

    def with_name(self, name: str) -> "Fund":
        return self.model_copy(update={"name": name})


class LedgerDocument(BaseModel):
    """
    Serialized ledger as written to disk.

    Funds are stored as an ordered list so insertion order survives a
    save/load cycle.
    """

    version: int = Field(
        default=LEDGER_FORMAT_VERSION,
        ge=1,
        description="On-disk format version"
    )
    funds: list[Fund] = Field(
        default_factory=list,
        description="Funds in insertion order"
    )

    @model_validator(mode="after")
    def validate_document(self) -> "LedgerDocument":
        """Reject unknown versions and duplicate fund names."""
        if self.version > LEDGER_FORMAT_VERSION:
            raise ValueError(
                f"Unsupported ledger format version {self.version} "
                f"(newest supported is {LEDGER_FORMAT_VERSION})"
            )

        seen: set[str] = set()
        for fund in self.funds:
            if fund.name in seen:
                raise ValueError(f"Duplicate fund name in ledger: {fund.name}")
            seen.add(fund.name)

        return self
