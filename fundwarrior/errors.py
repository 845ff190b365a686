"""
Ledger Errors

All of these are user errors: the command is rejected, nothing is saved,
and the user can retry with corrected input.
"""


class LedgerError(Exception):
    """Base exception for rejected ledger operations."""
    pass


class InvalidNameError(LedgerError):
    """Fund name is empty or contains whitespace."""
    pass


class DuplicateNameError(LedgerError):
    """A fund with this name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"fund '{name}' already exists. Please choose a different name"
        )


class InvalidAmountError(LedgerError):
    """Amount is unparseable, negative, or zero where a positive value is required."""
    pass


class NotFoundError(LedgerError):
    """No fund with this name exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"fund '{name}' not found")


class InsufficientFundsError(LedgerError):
    """Spending would drive the fund below zero."""

    def __init__(self, name: str, balance, amount):
        self.name = name
        self.balance = balance
        self.amount = amount
        super().__init__(
            f"cannot spend {amount} from '{name}': only {balance} available"
        )
