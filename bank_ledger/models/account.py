"""Account model for the ledger."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_ledger.exceptions import BankError, InsufficientFundsError, InvalidAmountError
from bank_ledger.models.enums import TransactionKind
from bank_ledger.models.money import (
    ZERO,
    AmountLike,
    add_exact,
    to_amount,
    to_positive_amount,
)
from bank_ledger.models.transaction import Transaction

INITIAL_DEPOSIT_DESCRIPTION = "Initial deposit"


@dataclass(frozen=True)
class AccountSummary:
    """Read-only snapshot of an account for reporting."""

    account_number: str
    holder_name: str
    account_type: str
    balance: Decimal


@dataclass
class Account:
    """Bank account holding one balance and its append-only transaction log.

    Accounts are created and owned by :class:`bank_ledger.store.Bank`.
    The balance only changes through :meth:`deposit`, :meth:`withdraw`
    and :meth:`transfer`, each of which either fully applies or raises
    before touching any state, so ``balance >= 0`` holds between calls.
    """

    account_number: str
    holder_name: str
    account_type: str
    balance: Decimal = ZERO
    transactions: list[Transaction] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def open(
        cls,
        account_number: str,
        holder_name: str,
        account_type: str,
        initial_balance: AmountLike = 0,
    ) -> Account:
        """Open an account, logging an initial deposit when the balance is positive.

        Parameters
        ----------
        account_number : str
            Number minted by the bank.
        holder_name : str
            Display name of the account holder.
        account_type : str
            Free-form classification (Savings, Checking, Business, ...).
        initial_balance : Decimal | int | float | str
            Opening balance, zero or positive.

        Raises
        ------
        InvalidAmountError
            If the initial balance is negative or not a number.
        """
        opening = to_amount(initial_balance)
        if opening < 0:
            raise InvalidAmountError("Initial balance cannot be negative!")

        account = cls(
            account_number=account_number,
            holder_name=holder_name,
            account_type=account_type,
        )
        if opening > 0:
            account._credit(opening, TransactionKind.DEPOSIT, INITIAL_DEPOSIT_DESCRIPTION)
        return account

    def deposit(self, amount: AmountLike, description: str = "") -> Transaction:
        """Add funds and log a Deposit."""
        value = to_positive_amount(amount, "Deposit")
        return self._credit(value, TransactionKind.DEPOSIT, description or "Deposit")

    def withdraw(self, amount: AmountLike, description: str = "") -> Transaction:
        """Remove funds and log a Withdrawal."""
        value = to_positive_amount(amount, "Withdrawal")
        self._check_funds(value)
        return self._debit(value, TransactionKind.WITHDRAWAL, description or "Withdrawal")

    def transfer(
        self, recipient: Account, amount: AmountLike, description: str = ""
    ) -> Transaction:
        """Move funds to another account, logging a Transfer on both sides.

        Every precondition is checked before either account is touched.

        Returns
        -------
        Transaction
            The record appended to this (sending) account's log.
        """
        value = to_positive_amount(amount, "Transfer")
        if recipient is self or recipient.account_number == self.account_number:
            raise BankError("Cannot transfer to the same account!")
        self._check_funds(value)
        credited = add_exact(recipient.balance, value)

        sent = self._debit(
            value, TransactionKind.TRANSFER, description or f"Transfer to {recipient.holder_name}"
        )
        recipient._post(
            TransactionKind.TRANSFER, value, f"Transfer from {self.holder_name}", credited
        )
        return sent

    def transaction_history(self) -> list[Transaction]:
        """Return the transaction log, oldest first."""
        return list(self.transactions)

    def summary(self) -> AccountSummary:
        """Return a read-only snapshot of this account."""
        return AccountSummary(
            account_number=self.account_number,
            holder_name=self.holder_name,
            account_type=self.account_type,
            balance=self.balance,
        )

    def _check_funds(self, amount: Decimal) -> None:
        if amount > self.balance:
            raise InsufficientFundsError(self.balance, amount)

    def _credit(self, amount: Decimal, kind: TransactionKind, description: str) -> Transaction:
        return self._post(kind, amount, description, add_exact(self.balance, amount))

    def _debit(self, amount: Decimal, kind: TransactionKind, description: str) -> Transaction:
        return self._post(kind, amount, description, self.balance - amount)

    def _post(
        self, kind: TransactionKind, amount: Decimal, description: str, new_balance: Decimal
    ) -> Transaction:
        transaction = Transaction(kind=kind, amount=amount, description=description)
        self.balance = new_balance
        self.transactions.append(transaction)
        return transaction
