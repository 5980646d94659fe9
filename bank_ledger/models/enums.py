"""Enumeration types for ledger entities."""

from enum import Enum


class TransactionKind(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"
    TRANSFER = "Transfer"


class AccountType(str, Enum):
    """Suggested account classifications.

    The ledger stores account types as free-form strings; these values
    are what the menu prompt offers and what demo seeding draws from.
    """

    SAVINGS = "Savings"
    CHECKING = "Checking"
    BUSINESS = "Business"
