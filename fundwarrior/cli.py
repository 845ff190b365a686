"""
FundWarrior command line.

    fund                              list all funds
    fund list [name]                  list all funds, or one
    fund new <name> [balance [goal]]  create a fund
    fund deposit <name> <amount>      add money to a fund
    fund spend <name> <amount>        take money out of a fund
    fund rename <old> <new>           rename a fund

Exit codes: 0 success, 1 user error, 2 storage error.
"""

import argparse
import sys
from typing import Optional, Sequence

from fundwarrior import __version__
from fundwarrior.config import ConfigurationError, get_settings
from fundwarrior.display import format_fund, format_funds
from fundwarrior.errors import LedgerError
from fundwarrior.events import EventLogger, configure_logging
from fundwarrior.orchestrator import CommandRunner
from fundwarrior.services.storage import PersistenceError


EXIT_OK = 0
EXIT_USER_ERROR = 1
EXIT_STORAGE_ERROR = 2


class FundArgumentParser(argparse.ArgumentParser):
    """Usage errors are user errors; exit code 2 is reserved for storage."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USER_ERROR, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = FundArgumentParser(
        prog="fund",
        description="Simple CLI Money Management",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Sets a custom config file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enables verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    list_parser = subparsers.add_parser(
        "list",
        aliases=["info"],
        help="View fund information",
    )
    list_parser.add_argument(
        "name",
        nargs="?",
        help="The name of the fund you wish to view. If absent, all funds will be printed.",
    )

    new_parser = subparsers.add_parser("new", help="Creates a new fund")
    new_parser.add_argument("name", help="The name of the fund to create")
    new_parser.add_argument(
        "balance",
        nargs="?",
        default="0.00",
        help="The amount to start the fund with (default 0.00)",
    )
    new_parser.add_argument(
        "goal",
        nargs="?",
        default="0.00",
        help="The amount you want this fund to have in the future (default 0.00)",
    )

    deposit_parser = subparsers.add_parser("deposit", help="Deposit money into a fund")
    deposit_parser.add_argument("name", help="The name of the fund you are depositing into")
    deposit_parser.add_argument("amount", help="The amount you wish to deposit, e.g. 25.00")

    spend_parser = subparsers.add_parser("spend", help="Spend money from a fund")
    spend_parser.add_argument("name", help="The name of the fund you are spending from")
    spend_parser.add_argument("amount", help="The amount you are spending, e.g. 25.00")

    rename_parser = subparsers.add_parser("rename", help="Rename a fund")
    rename_parser.add_argument("old_name", help="The current name of the fund")
    rename_parser.add_argument("new_name", help="The new name of the fund")

    return parser


def dispatch(runner: CommandRunner, args: argparse.Namespace) -> str:
    """Run the parsed command and return what should be printed."""
    command = args.command

    if command in (None, "list", "info"):
        name = getattr(args, "name", None)
        funds = runner.list_funds(name)
        return format_funds(funds)
    if command == "new":
        return format_fund(runner.create(args.name, args.balance, args.goal))
    if command == "deposit":
        return format_fund(runner.deposit(args.name, args.amount))
    if command == "spend":
        return format_fund(runner.spend(args.name, args.amount))
    if command == "rename":
        return format_fund(runner.rename(args.old_name, args.new_name))

    raise ValueError(f"unknown command: {command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings(args.config)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USER_ERROR

    configure_logging(
        level="DEBUG" if args.verbose else settings.log_level,
        log_format=settings.log_format,
    )
    runner = CommandRunner.from_settings(settings, event_logger=EventLogger())

    try:
        output = dispatch(runner, args)
    except LedgerError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USER_ERROR
    except PersistenceError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_STORAGE_ERROR

    print(output)
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
