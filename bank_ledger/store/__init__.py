"""In-memory ledger store."""

from bank_ledger.store.ledger import AccountHandle, Bank

__all__ = ["AccountHandle", "Bank"]
