"""Terminal rendering of funds."""

from decimal import Decimal
from typing import Iterable

from fundwarrior.models.fund import CENT, ZERO, Fund


EMPTY_LEDGER_MESSAGE = "No funds yet. Create one with: fund new <name> <balance> <goal>"


def format_dollars(amount: Decimal) -> str:
    """Format an amount as dollars, e.g. $1.00, $1234.50 or -$12.50."""
    amount = amount.quantize(CENT)
    if amount < 0:
        return f"-${-amount:.2f}"
    return f"${amount:.2f}"


def format_fund(fund: Fund) -> str:
    name = f"{fund.name}:"
    if fund.goal_reached:
        progress = "goal reached"
    else:
        progress = f"{format_dollars(fund.remaining_to_goal)} away from goal"
    return (
        f"{name:>10} {format_dollars(fund.balance):^8} / "
        f"{format_dollars(fund.goal):<8} -- {progress}"
    )


def format_funds(funds: Iterable[Fund]) -> str:
    """
    Render one line per fund.

    More than one fund gets a trailing total line.
    """
    funds = list(funds)
    if not funds:
        return EMPTY_LEDGER_MESSAGE

    lines = [format_fund(fund) for fund in funds]
    if len(funds) > 1:
        total_balance = sum((fund.balance for fund in funds), ZERO)
        total_goal = sum((fund.goal for fund in funds), ZERO)
        lines.append(
            f"{'total:':>10} {format_dollars(total_balance):^8} / "
            f"{format_dollars(total_goal):<8}"
        )
    return "\n".join(lines)
