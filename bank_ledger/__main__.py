"""Allow ``python -m bank_ledger``."""

from bank_ledger.cli import main

raise SystemExit(main())
