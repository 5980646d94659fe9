"""Transaction record for the ledger."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_ledger.exceptions import InvalidAmountError
from bank_ledger.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """Immutable record of a single balance-affecting event."""

    kind: TransactionKind
    amount: Decimal
    description: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal) or not self.amount.is_finite() or self.amount <= 0:
            raise InvalidAmountError(f"Transaction amount must be positive, got {self.amount!r}")
