"""Logging configuration for bank-ledger.

Ledger events are logged with their account fields attached as record
attributes (see :func:`ledger_fields`), so the JSON formatter can emit
them as separate keys instead of burying them in the message text.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, TextIO

# Record attributes the JSON formatter lifts out of ledger log calls, in output order.
LEDGER_FIELDS = ("event", "account_number", "counterparty", "amount", "balance")


def ledger_fields(event: str, account_number: str, **fields: Any) -> dict[str, Any]:
    """Build the ``extra=`` mapping for a ledger log call.

    Parameters
    ----------
    event : str
        Dotted event name, e.g. ``"deposit.completed"``.
    account_number : str
        Account the event belongs to.
    **fields
        Any of ``counterparty``, ``amount`` or ``balance``. ``None``
        values are dropped.

    Raises
    ------
    ValueError
        If a field name is not one of :data:`LEDGER_FIELDS`.
    """
    unknown = set(fields) - set(LEDGER_FIELDS)
    if unknown:
        raise ValueError(f"Unknown ledger log fields: {sorted(unknown)}")
    extra = {"event": event, "account_number": account_number}
    extra.update({k: v for k, v in fields.items() if v is not None})
    return extra


def setup_logging(
    level: str = "WARNING",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure the root logger for bank-ledger.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        "standard" for pipe-separated text, "json" for one object per line.
    stream : TextIO, optional
        Destination; stderr by default so stdout stays free for the menu.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("bank_ledger").setLevel(log_level)
    # Faker logs locale resolution at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render records as JSON, with ledger fields as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in LEDGER_FIELDS:
            value = getattr(record, name, None)
            if value is None:
                continue
            # Amounts stay exact strings rather than lossy floats
            log_data[name] = str(value) if isinstance(value, Decimal) else value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (usually ``__name__``)."""
    return logging.getLogger(name)
