"""Plain-text rendering of account and transaction reports."""

from datetime import datetime
from decimal import Decimal

from bank_ledger.models import AccountSummary, Transaction

ACCOUNT_RULE = "=" * 40
HISTORY_RULE = "=" * 42
LIST_RULE = "=" * 35


def format_money(amount: Decimal) -> str:
    """Format an amount as ``$1234.50``."""
    return f"${amount:.2f}"


def format_account_info(account: AccountSummary, opened_at: datetime | None = None) -> str:
    """Render the account information block."""
    lines = [
        "",
        "========== ACCOUNT INFORMATION ==========",
        f"Account Number: {account.account_number}",
        f"Holder Name:    {account.holder_name}",
        f"Account Type:   {account.account_type}",
        f"Current Balance: {format_money(account.balance)}",
    ]
    if opened_at is not None:
        lines.append(f"Opened:         {opened_at.ctime()}")
    lines.extend([ACCOUNT_RULE, ""])
    return "\n".join(lines)


def format_transaction(transaction: Transaction) -> str:
    """Render one history row."""
    return (
        f"{transaction.kind.value:<15}"
        f"{transaction.amount:<12.2f}"
        f"{transaction.description:<30}"
        f"{transaction.timestamp.ctime():<25}"
    ).rstrip()


def format_transaction_history(transactions: list[Transaction]) -> str:
    """Render an account's transaction log as a table, oldest first."""
    if not transactions:
        return "\nNo transactions yet."

    lines = [
        "",
        "========== TRANSACTION HISTORY ==========",
        f"{'Type':<15}{'Amount':<12}{'Description':<30}{'Timestamp':<25}".rstrip(),
        HISTORY_RULE,
    ]
    lines.extend(format_transaction(t) for t in transactions)
    lines.append(HISTORY_RULE)
    return "\n".join(lines)


def format_account_list(accounts: list[AccountSummary]) -> str:
    """Render the all-accounts table."""
    if not accounts:
        return "\nNo accounts available."

    lines = [
        "",
        "========== ALL ACCOUNTS ==========",
        f"{'Account #':<12}{'Holder Name':<20}{'Type':<12}{'Balance':<15}".rstrip(),
        LIST_RULE,
    ]
    for account in accounts:
        lines.append(
            f"{account.account_number:<12}"
            f"{account.holder_name:<20}"
            f"{account.account_type:<12}"
            f"{format_money(account.balance)}"
        )
    lines.append(LIST_RULE)
    return "\n".join(lines)
