"""Ledger domain models."""

from bank_ledger.models.account import Account, AccountSummary
from bank_ledger.models.enums import AccountType, TransactionKind
from bank_ledger.models.money import add_exact, to_amount, to_positive_amount
from bank_ledger.models.transaction import Transaction

__all__ = [
    "Account",
    "AccountSummary",
    "AccountType",
    "Transaction",
    "TransactionKind",
    "add_exact",
    "to_amount",
    "to_positive_amount",
]
