"""Pytest configuration and fixtures."""

import pytest

from bank_ledger.store import Bank


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def bank() -> Bank:
    """Create a fresh, empty bank for each test."""
    return Bank()


@pytest.fixture
def alice(bank: Bank) -> str:
    """Savings account for Alice opened with $100.00 (ACC1001)."""
    return bank.create_account("Alice", "Savings", 100)


@pytest.fixture
def bob(bank: Bank, alice: str) -> str:
    """Empty checking account for Bob (ACC1002)."""
    return bank.create_account("Bob", "Checking")
