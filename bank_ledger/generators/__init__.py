"""Demo data generators."""

from bank_ledger.generators.account import (
    AccountGenerator,
    AccountRequest,
    ActivityGenerator,
    seed_bank,
)

__all__ = ["AccountGenerator", "AccountRequest", "ActivityGenerator", "seed_bank"]
