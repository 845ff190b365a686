"""
FundWarrior

Envelope budgeting from the command line: split one balance into named
funds, each with an amount and an optional goal.

DESIGN PRINCIPLES:
1. Money is exact (Decimal cents, never floats)
2. Validate first, mutate second, save last
3. A failed command never changes the fund file
4. Storage is swappable
"""

__version__ = "0.6.1"
__author__ = "FundWarrior Team"
