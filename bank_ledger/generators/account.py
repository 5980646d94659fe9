"""Demo account and activity generators."""

import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from bank_ledger.exceptions import BankError
from bank_ledger.generators.base import BaseGenerator
from bank_ledger.logging import get_logger
from bank_ledger.models.enums import AccountType, TransactionKind
from bank_ledger.store import Bank

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccountRequest:
    """Arguments for :meth:`Bank.create_account`."""

    holder_name: str
    account_type: str
    initial_balance: Decimal


class AccountGenerator(BaseGenerator):
    """Generate demo account openings.

    Account type mix:
    - Checking: most common (~60%)
    - Savings: ~30%
    - Business: ~10%, held by a company name instead of a person
    """

    ACCOUNT_TYPES = [AccountType.CHECKING, AccountType.SAVINGS, AccountType.BUSINESS]
    ACCOUNT_TYPE_WEIGHTS = [0.60, 0.30, 0.10]

    # Roughly one in five demo accounts opens empty
    EMPTY_OPENING_RATE = 0.2

    def generate(self) -> AccountRequest:
        """Generate a single account opening."""
        account_type = random.choices(
            self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
        )[0]
        holder_name = self.fake.company() if account_type == AccountType.BUSINESS else self.fake.name()

        if random.random() < self.EMPTY_OPENING_RATE:
            initial_balance = Decimal("0.00")
        else:
            initial_balance = Decimal(str(round(random.uniform(50, 5000), 2)))

        return AccountRequest(
            holder_name=holder_name,
            account_type=account_type.value,
            initial_balance=initial_balance.quantize(Decimal("0.01")),
        )

    def generate_batch(self, count: int) -> Iterator[AccountRequest]:
        """Generate ``count`` account openings."""
        for _ in range(count):
            yield self.generate()


class ActivityGenerator(BaseGenerator):
    """Replay random deposits, withdrawals and transfers against a bank.

    Every movement goes through the bank's public operations, so the
    ledger invariants hold for seeded data exactly as for menu input.
    Debits are sized from the current balance and are skipped on
    accounts that are empty.
    """

    KINDS = list(TransactionKind)
    KIND_WEIGHTS = [0.45, 0.30, 0.25]

    DEPOSIT_MEMOS = ["Payroll", "Cash deposit", "Refund", "Check deposit", ""]
    WITHDRAWAL_MEMOS = ["ATM withdrawal", "Groceries", "Rent", "Utilities", ""]

    def generate_for_account(self, bank: Bank, account_number: str, count: int) -> int:
        """Apply up to ``count`` random movements to one account.

        Returns
        -------
        int
            Number of movements applied.
        """
        applied = 0
        for _ in range(count):
            kind = random.choices(self.KINDS, weights=self.KIND_WEIGHTS, k=1)[0]
            balance = bank.get_balance(account_number)

            if kind == TransactionKind.DEPOSIT or balance <= 0:
                amount = Decimal(str(round(random.uniform(10, 1000), 2)))
                bank.deposit(account_number, amount, random.choice(self.DEPOSIT_MEMOS))
                applied += 1
                continue

            amount = (balance * Decimal(str(random.uniform(0.05, 0.5)))).quantize(Decimal("0.01"))
            if amount <= 0:
                continue

            if kind == TransactionKind.WITHDRAWAL:
                bank.withdraw(account_number, amount, random.choice(self.WITHDRAWAL_MEMOS))
                applied += 1
                continue

            others = [n for n in bank.accounts if n != account_number]
            if not others:
                continue
            bank.transfer(account_number, random.choice(others), amount)
            applied += 1
        return applied


def seed_bank(
    bank: Bank,
    num_accounts: int,
    transactions_per_account: int = 3,
    seed: int | None = None,
    locale: str = "en_US",
) -> list[str]:
    """Open demo accounts and replay random activity on them.

    Parameters
    ----------
    bank : Bank
        Bank to populate.
    num_accounts : int
        Number of accounts to open.
    transactions_per_account : int
        Random movements to attempt per account after all are opened.
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale for holder names.

    Returns
    -------
    list[str]
        Numbers of the opened accounts, in creation order.
    """
    account_gen = AccountGenerator(seed=seed, locale=locale)
    activity_gen = ActivityGenerator(locale=locale)

    opened = []
    for request in account_gen.generate_batch(num_accounts):
        opened.append(
            bank.create_account(request.holder_name, request.account_type, request.initial_balance)
        )

    movements = 0
    for account_number in opened:
        try:
            movements += activity_gen.generate_for_account(
                bank, account_number, transactions_per_account
            )
        except BankError as e:
            logger.warning("Demo activity on %s stopped: %s", account_number, e)

    logger.info("Seeded %d demo accounts with %d movements", len(opened), movements)
    return opened
