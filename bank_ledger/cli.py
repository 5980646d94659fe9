"""Interactive menu for the bank ledger."""

import argparse
import sys
from collections.abc import Callable

from bank_ledger.config import LOG_FORMATS, BankConfig
from bank_ledger.console import (
    format_account_info,
    format_account_list,
    format_money,
    format_transaction_history,
)
from bank_ledger.exceptions import BankError, ConfigurationError
from bank_ledger.generators import seed_bank
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.models import to_amount
from bank_ledger.store import Bank

logger = get_logger(__name__)

MENU = """
========== BANK MANAGEMENT SYSTEM ==========
1. Create Account
2. View Account Information
3. Deposit Money
4. Withdraw Money
5. Transfer Money
6. View Transaction History
7. View All Accounts
8. Delete Account
9. Exit
==========================================="""

EXIT_CHOICE = 9


class BankMenu:
    """Numbered menu loop driving a :class:`Bank`.

    Parameters
    ----------
    bank : Bank
        Ledger the menu operates on.
    input_func : Callable[[str], str]
        Reads one line after showing a prompt (default ``input``).
    output : Callable[[str], None]
        Writes one block of text (default ``print``).
    """

    def __init__(
        self,
        bank: Bank,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.bank = bank
        self._input = input_func
        self._output = output
        self._actions: dict[int, Callable[[], None]] = {
            1: self.create_account,
            2: self.view_account,
            3: self.deposit,
            4: self.withdraw,
            5: self.transfer,
            6: self.view_history,
            7: self.view_all_accounts,
            8: self.delete_account,
        }

    def run(self) -> int:
        """Run until the operator exits. Returns the process exit code."""
        self._output("========== WELCOME TO BANK MANAGEMENT SYSTEM ==========")
        try:
            while self.handle_choice(self._input(MENU + "\nEnter your choice (1-9): ")):
                pass
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving menu")
        self._output("\nThank you for using Bank Management System. Goodbye!")
        return 0

    def handle_choice(self, raw_choice: str) -> bool:
        """Dispatch one menu choice. Returns False when the operator chose Exit."""
        try:
            choice = int(raw_choice.strip())
        except ValueError:
            choice = -1

        if choice == EXIT_CHOICE:
            return False

        action = self._actions.get(choice)
        if action is None:
            self._output("Invalid choice! Please try again.")
            return True

        try:
            action()
        except BankError as e:
            self._output(f"Error: {e}")
        return True

    def create_account(self) -> None:
        name = self._input("\nEnter account holder name: ")
        account_type = self._input("Enter account type (Savings/Checking/Business): ")
        initial_balance = to_amount(
            self._input("Enter initial balance (press 0 for no initial deposit): ")
        )

        account_number = self.bank.create_account(name, account_type, initial_balance)
        self._output("Account created successfully!")
        self._output(f"Account Number: {account_number}")
        self._output(f"Account Holder: {name.strip()}")

    def view_account(self) -> None:
        account = self.bank.find_account(self._input("\nEnter account number: "))
        self._output(format_account_info(account.summary(), account.created_at))

    def deposit(self) -> None:
        account_number = self._input("\nEnter account number: ")
        amount = to_amount(self._input("Enter deposit amount: $"))

        transaction = self.bank.find_account(account_number).deposit(amount)
        self._output(f"Successfully deposited {format_money(transaction.amount)}")

    def withdraw(self) -> None:
        account_number = self._input("\nEnter account number: ")
        amount = to_amount(self._input("Enter withdrawal amount: $"))

        transaction = self.bank.find_account(account_number).withdraw(amount)
        self._output(f"Successfully withdrawn {format_money(transaction.amount)}")

    def transfer(self) -> None:
        from_number = self._input("\nEnter source account number: ")
        to_number = self._input("Enter destination account number: ")
        amount = to_amount(self._input("Enter transfer amount: $"))

        sender = self.bank.find_account(from_number)
        recipient = self.bank.find_account(to_number)
        transaction = sender.transfer(recipient, amount)
        self._output(
            f"Successfully transferred {format_money(transaction.amount)} to {recipient.holder_name}"
        )

    def view_history(self) -> None:
        account = self.bank.find_account(self._input("\nEnter account number: "))
        self._output(format_transaction_history(account.transaction_history()))

    def view_all_accounts(self) -> None:
        self._output(format_account_list(self.bank.list_accounts()))

    def delete_account(self) -> None:
        self.bank.delete_account(self._input("\nEnter account number to delete: "))
        self._output("Account deleted successfully.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-ledger",
        description="Interactive in-memory bank management system",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level, overrides LOG_LEVEL (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log format, overrides LOG_FORMAT (default: standard)",
    )
    parser.add_argument(
        "--demo-accounts",
        type=int,
        default=None,
        help="Open this many Faker-generated demo accounts before the menu starts",
    )
    parser.add_argument(
        "--demo-transactions",
        type=int,
        default=None,
        help="Random movements per demo account (default: 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible demo data",
    )
    parser.add_argument(
        "--locale",
        type=str,
        default=None,
        help="Faker locale for demo holder names (default: en_US)",
    )
    return parser


def load_config(args: argparse.Namespace) -> BankConfig:
    """Build configuration from the environment, then apply command-line overrides."""
    config = BankConfig.from_env()
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if args.demo_accounts is not None:
        config.demo.num_accounts = args.demo_accounts
    if args.demo_transactions is not None:
        config.demo.transactions_per_account = args.demo_transactions
    if args.seed is not None:
        config.demo.seed = args.seed
    if args.locale is not None:
        config.demo.locale = args.locale
    config.validate()
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(level=config.log_level, format_type=config.log_format)

    bank = Bank(
        account_prefix=config.ledger.account_prefix,
        counter_base=config.ledger.counter_base,
    )
    if config.demo.num_accounts:
        seed_bank(
            bank,
            config.demo.num_accounts,
            transactions_per_account=config.demo.transactions_per_account,
            seed=config.demo.seed,
            locale=config.demo.locale,
        )

    return BankMenu(bank).run()
