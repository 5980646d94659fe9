"""Configuration management for bank-ledger."""

import os
from dataclasses import dataclass, field

from faker.config import AVAILABLE_LOCALES

from bank_ledger.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class LedgerConfig:
    """Account-number minting configuration."""

    account_prefix: str = "ACC"
    counter_base: int = 1000


@dataclass
class DemoConfig:
    """Demo account seeding configuration."""

    num_accounts: int = 0
    transactions_per_account: int = 3
    locale: str = "en_US"
    seed: int | None = None


@dataclass
class BankConfig:
    """Main configuration for bank-ledger."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    def validate(self) -> None:
        """Check value ranges.

        Raises
        ------
        ConfigurationError
            If any value is out of range.
        """
        if not self.ledger.account_prefix:
            raise ConfigurationError("Account prefix must not be empty")
        if self.ledger.counter_base < 0:
            raise ConfigurationError("Counter base must be zero or positive")
        if self.demo.num_accounts < 0:
            raise ConfigurationError("Demo account count must be zero or positive")
        if self.demo.transactions_per_account < 0:
            raise ConfigurationError("Demo transactions per account must be zero or positive")
        if self.demo.locale.replace("-", "_") not in AVAILABLE_LOCALES:
            raise ConfigurationError(f"Unknown Faker locale {self.demo.locale!r}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        ledger = LedgerConfig(
            account_prefix=os.getenv("BANK_ACCOUNT_PREFIX", "ACC"),
            counter_base=_int_env("BANK_COUNTER_BASE", 1000),
        )

        seed = os.getenv("SEED")
        demo = DemoConfig(
            num_accounts=_int_env("BANK_DEMO_ACCOUNTS", 0),
            transactions_per_account=_int_env("BANK_DEMO_TRANSACTIONS", 3),
            locale=os.getenv("BANK_DEMO_LOCALE", "en_US"),
            seed=_int_env("SEED", 0) if seed else None,
        )

        config = cls(
            ledger=ledger,
            demo=demo,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard").lower(),
        )
        config.validate()
        return config


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
