"""Custom exception hierarchy for bank-ledger."""

from decimal import Decimal


class BankError(Exception):
    """Base exception for all bank-ledger errors."""


class InvalidAmountError(BankError):
    """Raised when an amount is not a positive number of cents."""


class InsufficientFundsError(BankError):
    """Raised when a debit exceeds the available balance."""

    def __init__(self, balance: Decimal, requested: Decimal) -> None:
        super().__init__(
            f"Insufficient balance! Current balance: ${balance:.2f}, requested: ${requested:.2f}"
        )
        self.balance = balance
        self.requested = requested


class AccountNotFoundError(BankError):
    """Raised when an account number is not in the registry."""

    def __init__(self, account_number: str) -> None:
        super().__init__(f"Account {account_number} not found")
        self.account_number = account_number


class DuplicateAccountError(BankError):
    """Raised when a minted account number is already registered."""


class ConfigurationError(BankError):
    """Raised when configuration is invalid or missing."""
