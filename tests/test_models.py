"""Tests for ledger models and money helpers."""

from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal

import pytest

from bank_ledger.exceptions import BankError, InsufficientFundsError, InvalidAmountError
from bank_ledger.models import (
    Account,
    AccountSummary,
    AccountType,
    Transaction,
    TransactionKind,
    add_exact,
    to_amount,
    to_positive_amount,
)


class TestToAmount:
    """Tests for money parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (10, Decimal("10.00")),
            ("25.5", Decimal("25.50")),
            (" 7 ", Decimal("7.00")),
            (0.1, Decimal("0.10")),
            (Decimal("1.005"), Decimal("1.01")),
            ("-3", Decimal("-3.00")),
        ],
    )
    def test_converts_to_cents(self, value: object, expected: Decimal) -> None:
        assert to_amount(value) == expected

    def test_result_has_two_places(self) -> None:
        assert to_amount(3).as_tuple().exponent == -2

    @pytest.mark.parametrize("value", ["abc", "", "nan", "inf", "-Infinity", "1e40", True])
    def test_rejects_non_numbers(self, value: object) -> None:
        with pytest.raises(InvalidAmountError, match="Invalid amount"):
            to_amount(value)

    def test_positive_amount_rejects_zero(self) -> None:
        with pytest.raises(InvalidAmountError, match="Deposit amount must be positive!"):
            to_positive_amount(0, "Deposit")

    def test_positive_amount_rejects_sub_cent(self) -> None:
        """Amounts that round to zero cents are not positive."""
        with pytest.raises(InvalidAmountError):
            to_positive_amount("0.001")

    def test_positive_amount_accepts_cent(self) -> None:
        assert to_positive_amount("0.01") == Decimal("0.01")

    def test_add_exact_sums(self) -> None:
        assert add_exact(Decimal("0.10"), Decimal("0.20")) == Decimal("0.30")

    def test_add_exact_refuses_rounded_sum(self) -> None:
        largest = Decimal("99999999999999999999999999.99")

        with pytest.raises(InvalidAmountError, match="significant digits"):
            add_exact(largest, Decimal("0.01"))


class TestTransaction:
    """Tests for the Transaction record."""

    def test_creation_defaults_timestamp(self) -> None:
        before = datetime.now()
        tx = Transaction(kind=TransactionKind.DEPOSIT, amount=Decimal("5.00"), description="Deposit")
        assert before <= tx.timestamp <= datetime.now()

    def test_is_immutable(self) -> None:
        tx = Transaction(kind=TransactionKind.DEPOSIT, amount=Decimal("5.00"), description="Deposit")
        with pytest.raises(FrozenInstanceError):
            tx.amount = Decimal("6.00")  # type: ignore[misc]

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5.00"), Decimal("NaN"), 5, "5.00"])
    def test_rejects_non_positive_or_non_decimal_amount(self, amount: object) -> None:
        with pytest.raises(InvalidAmountError, match="Transaction amount must be positive"):
            Transaction(kind=TransactionKind.DEPOSIT, amount=amount, description="Deposit")  # type: ignore[arg-type]

    def test_kind_values(self) -> None:
        assert TransactionKind.DEPOSIT == "Deposit"
        assert TransactionKind.WITHDRAWAL == "Withdrawal"
        assert TransactionKind.TRANSFER == "Transfer"


class TestAccountOpen:
    """Tests for opening accounts."""

    def test_open_with_initial_balance(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 100)

        assert account.balance == Decimal("100")
        assert len(account.transactions) == 1
        tx = account.transactions[0]
        assert tx.kind == TransactionKind.DEPOSIT
        assert tx.amount == Decimal("100")
        assert tx.description == "Initial deposit"

    def test_open_with_zero_balance(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 0)

        assert account.balance == Decimal("0")
        assert account.transactions == []

    def test_open_with_negative_balance_fails(self) -> None:
        with pytest.raises(InvalidAmountError, match="cannot be negative"):
            Account.open("ACC1", "Alice", "Savings", -1)

    def test_account_type_is_free_form(self) -> None:
        account = Account.open("ACC1", "Alice", "Joint")
        assert account.account_type == "Joint"

    def test_suggested_account_types(self) -> None:
        assert [t.value for t in AccountType] == ["Savings", "Checking", "Business"]


class TestAccountDeposit:
    """Tests for deposits."""

    def test_deposit_increases_balance(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 10)
        tx = account.deposit("2.50")

        assert account.balance == Decimal("12.50")
        assert tx.kind == TransactionKind.DEPOSIT
        assert tx.amount == Decimal("2.50")
        assert tx.description == "Deposit"
        assert account.transactions[-1] is tx

    def test_deposit_custom_description(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings")
        tx = account.deposit(5, "Payroll")
        assert tx.description == "Payroll"

    @pytest.mark.parametrize("amount", [0, -5, "-0.01"])
    def test_deposit_non_positive_fails(self, amount: object) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 10)

        with pytest.raises(InvalidAmountError, match="Deposit amount must be positive!"):
            account.deposit(amount)

        assert account.balance == Decimal("10")
        assert len(account.transactions) == 1


class TestAccountWithdraw:
    """Tests for withdrawals."""

    def test_withdraw_decreases_balance(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 100)
        tx = account.withdraw(40)

        assert account.balance == Decimal("60")
        assert tx.kind == TransactionKind.WITHDRAWAL
        assert tx.description == "Withdrawal"

    def test_withdraw_entire_balance(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 100)
        account.withdraw(100)
        assert account.balance == Decimal("0")

    def test_withdraw_more_than_balance_fails(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 100)

        with pytest.raises(InsufficientFundsError):
            account.withdraw("100.01")

        assert account.balance == Decimal("100")
        assert len(account.transactions) == 1

    def test_withdraw_non_positive_fails(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 100)

        with pytest.raises(InvalidAmountError, match="Withdrawal amount must be positive!"):
            account.withdraw(0)

        assert account.balance == Decimal("100")


class TestAccountTransfer:
    """Tests for transfers between two accounts."""

    def test_transfer_moves_funds_and_logs_both_sides(self) -> None:
        alice = Account.open("ACC1", "Alice", "Savings", 100)
        bob = Account.open("ACC2", "Bob", "Checking", 5)

        tx = alice.transfer(bob, 30)

        assert alice.balance == Decimal("70")
        assert bob.balance == Decimal("35")
        assert tx is alice.transactions[-1]
        assert tx.kind == TransactionKind.TRANSFER
        assert tx.description == "Transfer to Bob"
        received = bob.transactions[-1]
        assert received.kind == TransactionKind.TRANSFER
        assert received.amount == Decimal("30")
        assert received.description == "Transfer from Alice"
        assert len(alice.transactions) == 2
        assert len(bob.transactions) == 2

    def test_transfer_custom_description_only_on_sender(self) -> None:
        alice = Account.open("ACC1", "Alice", "Savings", 100)
        bob = Account.open("ACC2", "Bob", "Checking")

        alice.transfer(bob, 10, "Rent share")

        assert alice.transactions[-1].description == "Rent share"
        assert bob.transactions[-1].description == "Transfer from Alice"

    def test_transfer_insufficient_funds_touches_neither(self) -> None:
        alice = Account.open("ACC1", "Alice", "Savings", 10)
        bob = Account.open("ACC2", "Bob", "Checking", 5)

        with pytest.raises(InsufficientFundsError):
            alice.transfer(bob, 11)

        assert alice.balance == Decimal("10")
        assert bob.balance == Decimal("5")
        assert len(alice.transactions) == 1
        assert len(bob.transactions) == 1

    def test_transfer_invalid_amount_touches_neither(self) -> None:
        alice = Account.open("ACC1", "Alice", "Savings", 10)
        bob = Account.open("ACC2", "Bob", "Checking")

        with pytest.raises(InvalidAmountError, match="Transfer amount must be positive!"):
            alice.transfer(bob, -1)

        assert alice.balance == Decimal("10")
        assert bob.transactions == []

    def test_transfer_to_self_fails(self) -> None:
        alice = Account.open("ACC1", "Alice", "Savings", 10)

        with pytest.raises(BankError, match="same account"):
            alice.transfer(alice, 5)

        assert alice.balance == Decimal("10")
        assert len(alice.transactions) == 1


class TestAccountPrecision:
    """Balances near the decimal context limit are never rounded."""

    LARGEST = "99999999999999999999999999.99"

    def test_deposit_past_precision_fails(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", self.LARGEST)

        with pytest.raises(InvalidAmountError):
            account.deposit(self.LARGEST)

        assert account.balance == Decimal(self.LARGEST)
        assert len(account.transactions) == 1

    def test_deposit_at_precision_is_exact(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", "99999999999999999999999999.98")

        account.deposit("0.01")

        assert account.balance == Decimal(self.LARGEST)

    def test_transfer_overflowing_recipient_touches_neither(self) -> None:
        alice = Account.open("ACC1", "Alice", "Savings", 100)
        bob = Account.open("ACC2", "Bob", "Checking", self.LARGEST)

        with pytest.raises(InvalidAmountError):
            alice.transfer(bob, 1)

        assert alice.balance == Decimal("100")
        assert bob.balance == Decimal(self.LARGEST)
        assert len(alice.transactions) == 1
        assert len(bob.transactions) == 1


class TestAccountQueries:
    """Tests for read-only views."""

    def test_transaction_history_is_a_copy(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 10)
        history = account.transaction_history()
        history.clear()

        assert len(account.transactions) == 1

    def test_transaction_history_oldest_first(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 10)
        account.deposit(1)
        account.withdraw(2)

        kinds = [t.kind for t in account.transaction_history()]
        assert kinds == [
            TransactionKind.DEPOSIT,
            TransactionKind.DEPOSIT,
            TransactionKind.WITHDRAWAL,
        ]

    def test_summary(self) -> None:
        account = Account.open("ACC1", "Alice", "Savings", 10)
        assert account.summary() == AccountSummary("ACC1", "Alice", "Savings", Decimal("10"))
