"""bank-ledger: an interactive in-memory toy bank."""

from bank_ledger.exceptions import (
    AccountNotFoundError,
    BankError,
    ConfigurationError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAmountError,
)
from bank_ledger.models import Account, AccountSummary, AccountType, Transaction, TransactionKind
from bank_ledger.store import AccountHandle, Bank

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountHandle",
    "AccountNotFoundError",
    "AccountSummary",
    "AccountType",
    "Bank",
    "BankError",
    "ConfigurationError",
    "DuplicateAccountError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "Transaction",
    "TransactionKind",
    "__version__",
]
