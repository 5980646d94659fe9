"""In-memory account registry with monotonic account-number minting."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_ledger.exceptions import (
    AccountNotFoundError,
    BankError,
    DuplicateAccountError,
    InvalidAmountError,
)
from bank_ledger.logging import get_logger, ledger_fields
from bank_ledger.models import Account, AccountSummary, Transaction
from bank_ledger.models.money import ZERO, AmountLike, to_amount

logger = get_logger(__name__)


@dataclass
class Bank:
    """Ledger that owns every account and the account-number counter.

    The bank is the only place accounts are created. Callers get
    :class:`AccountHandle` objects back, which re-resolve the account by
    number on every use, so a deleted account can never be mutated
    through a handle taken before the deletion.

    Not safe for concurrent mutation; one caller at a time.

    Parameters
    ----------
    account_prefix : str
        Prefix for minted account numbers (default ``"ACC"``).
    counter_base : int
        Counter seed; the first account gets ``counter_base + 1``.
    """

    account_prefix: str = "ACC"
    counter_base: int = 1000

    accounts: dict[str, Account] = field(default_factory=dict, init=False, repr=False)
    _counter: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._counter = self.counter_base

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, account_number: object) -> bool:
        return isinstance(account_number, str) and account_number.strip() in self.accounts

    # Registry operations
    def create_account(
        self,
        holder_name: str,
        account_type: str,
        initial_balance: AmountLike = 0,
    ) -> str:
        """Open a new account and return its number.

        Parameters
        ----------
        holder_name : str
            Display name of the account holder.
        account_type : str
            Free-form classification (e.g. Savings, Checking, Business).
        initial_balance : Decimal | int | float | str
            Opening balance. A positive value is logged as an
            "Initial deposit"; zero leaves the log empty.

        Returns
        -------
        str
            The minted account number, e.g. ``ACC1001``.

        Raises
        ------
        InvalidAmountError
            If the initial balance is negative or not a number.
        BankError
            If the holder name or account type is blank.
        """
        holder_name = holder_name.strip()
        account_type = account_type.strip()
        if not holder_name:
            raise BankError("Account holder name is required!")
        if not account_type:
            raise BankError("Account type is required!")

        # Validated before minting so a rejected request burns no number.
        opening = to_amount(initial_balance)
        if opening < 0:
            raise InvalidAmountError("Initial balance cannot be negative!")

        account_number = self._mint_account_number()
        if account_number in self.accounts:
            raise DuplicateAccountError(f"Account {account_number} already exists!")
        account = Account.open(account_number, holder_name, account_type, opening)

        self.accounts[account_number] = account
        logger.info(
            "Opened %s for %s (%s) with balance %s",
            account_number,
            holder_name,
            account_type,
            account.balance,
            extra=ledger_fields("account.opened", account_number, balance=account.balance),
        )
        return account_number

    def find_account(self, account_number: str) -> AccountHandle:
        """Resolve an account number to a handle.

        Raises
        ------
        AccountNotFoundError
            If no account with that number exists.
        """
        account = self._resolve(account_number)
        return AccountHandle(self, account.account_number)

    def delete_account(self, account_number: str) -> None:
        """Remove an account. Its number is never issued again."""
        account = self._resolve(account_number)
        del self.accounts[account.account_number]
        logger.info(
            "Deleted %s (final balance %s)",
            account.account_number,
            account.balance,
            extra=ledger_fields("account.deleted", account.account_number, balance=account.balance),
        )

    def list_accounts(self) -> list[AccountSummary]:
        """Return account snapshots ordered by account number."""
        return [self.accounts[number].summary() for number in sorted(self.accounts)]

    # Money movement keyed by account number
    def deposit(self, account_number: str, amount: AmountLike, description: str = "") -> Transaction:
        """Deposit into an account."""
        account = self._resolve(account_number)
        try:
            transaction = account.deposit(amount, description)
        except BankError as e:
            logger.warning(
                "Deposit to %s rejected: %s",
                account.account_number,
                e,
                extra=ledger_fields("deposit.rejected", account.account_number),
            )
            raise
        logger.info(
            "Deposited %s to %s",
            transaction.amount,
            account.account_number,
            extra=ledger_fields(
                "deposit.completed",
                account.account_number,
                amount=transaction.amount,
                balance=account.balance,
            ),
        )
        return transaction

    def withdraw(self, account_number: str, amount: AmountLike, description: str = "") -> Transaction:
        """Withdraw from an account."""
        account = self._resolve(account_number)
        try:
            transaction = account.withdraw(amount, description)
        except BankError as e:
            logger.warning(
                "Withdrawal from %s rejected: %s",
                account.account_number,
                e,
                extra=ledger_fields("withdrawal.rejected", account.account_number),
            )
            raise
        logger.info(
            "Withdrew %s from %s",
            transaction.amount,
            account.account_number,
            extra=ledger_fields(
                "withdrawal.completed",
                account.account_number,
                amount=transaction.amount,
                balance=account.balance,
            ),
        )
        return transaction

    def transfer(
        self,
        from_account: str,
        to_account: str,
        amount: AmountLike,
        description: str = "",
    ) -> Transaction:
        """Transfer between two accounts.

        Both endpoints are resolved before anything is mutated, so an
        unknown number on either side leaves both balances untouched.

        Returns
        -------
        Transaction
            The record appended to the sender's log.
        """
        sender = self._resolve(from_account)
        recipient = self._resolve(to_account)
        try:
            transaction = sender.transfer(recipient, amount, description)
        except BankError as e:
            logger.warning(
                "Transfer %s -> %s rejected: %s",
                sender.account_number,
                recipient.account_number,
                e,
                extra=ledger_fields(
                    "transfer.rejected",
                    sender.account_number,
                    counterparty=recipient.account_number,
                ),
            )
            raise
        logger.info(
            "Transferred %s from %s to %s",
            transaction.amount,
            sender.account_number,
            recipient.account_number,
            extra=ledger_fields(
                "transfer.completed",
                sender.account_number,
                counterparty=recipient.account_number,
                amount=transaction.amount,
                balance=sender.balance,
            ),
        )
        return transaction

    # Queries
    def get_account(self, account_number: str) -> AccountSummary:
        """Get a snapshot of one account."""
        return self._resolve(account_number).summary()

    def get_balance(self, account_number: str) -> Decimal:
        """Get the current balance of an account."""
        return self._resolve(account_number).balance

    def get_transactions(self, account_number: str) -> list[Transaction]:
        """Get an account's transactions, oldest first."""
        return self._resolve(account_number).transaction_history()

    def summary(self) -> dict[str, int | Decimal]:
        """Return summary counts and the total held across all accounts."""
        return {
            "accounts": len(self.accounts),
            "transactions": sum(len(a.transactions) for a in self.accounts.values()),
            "total_balance": sum((a.balance for a in self.accounts.values()), ZERO),
        }

    def _mint_account_number(self) -> str:
        self._counter += 1
        return f"{self.account_prefix}{self._counter}"

    def _resolve(self, account_number: str) -> Account:
        key = account_number.strip() if isinstance(account_number, str) else account_number
        try:
            return self.accounts[key]
        except (KeyError, TypeError):
            raise AccountNotFoundError(str(account_number)) from None


class AccountHandle:
    """Non-owning reference to an account in a :class:`Bank`.

    Holds only the bank and the account number. Every attribute access
    and operation looks the account up again, raising
    :class:`AccountNotFoundError` once the account has been deleted.
    """

    __slots__ = ("_bank", "_account_number")

    def __init__(self, bank: Bank, account_number: str) -> None:
        self._bank = bank
        self._account_number = account_number

    def __repr__(self) -> str:
        return f"AccountHandle({self._account_number!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccountHandle):
            return NotImplemented
        return self._bank is other._bank and self._account_number == other._account_number

    def __hash__(self) -> int:
        return hash((id(self._bank), self._account_number))

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def is_valid(self) -> bool:
        """Whether the account still exists in the bank."""
        return self._account_number in self._bank.accounts

    @property
    def holder_name(self) -> str:
        return self._account().holder_name

    @property
    def account_type(self) -> str:
        return self._account().account_type

    @property
    def balance(self) -> Decimal:
        return self._account().balance

    @property
    def created_at(self) -> datetime:
        return self._account().created_at

    def deposit(self, amount: AmountLike, description: str = "") -> Transaction:
        return self._bank.deposit(self._account_number, amount, description)

    def withdraw(self, amount: AmountLike, description: str = "") -> Transaction:
        return self._bank.withdraw(self._account_number, amount, description)

    def transfer(
        self,
        recipient: AccountHandle | str,
        amount: AmountLike,
        description: str = "",
    ) -> Transaction:
        """Transfer to another account, given as a handle or a number."""
        to_account = recipient.account_number if isinstance(recipient, AccountHandle) else recipient
        return self._bank.transfer(self._account_number, to_account, amount, description)

    def transaction_history(self) -> list[Transaction]:
        return self._bank.get_transactions(self._account_number)

    def summary(self) -> AccountSummary:
        return self._bank.get_account(self._account_number)

    def _account(self) -> Account:
        return self._bank._resolve(self._account_number)
