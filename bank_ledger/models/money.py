"""Fixed-point money helpers."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, Rounded, localcontext

from bank_ledger.exceptions import InvalidAmountError

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

AmountLike = Decimal | int | float | str


def to_amount(value: AmountLike) -> Decimal:
    """Convert a user-supplied value to a Decimal quantized to cents.

    Floats go through ``str()`` first so ``0.1`` becomes ``Decimal("0.10")``
    rather than its binary expansion.

    Parameters
    ----------
    value : Decimal | int | float | str
        Amount to convert.

    Returns
    -------
    Decimal
        Amount rounded half-up to two decimal places.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number or is too large to hold in cents.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        if not amount.is_finite():
            raise InvalidAmountError(f"Invalid amount: {value!r}")
        # InvalidOperation past the context precision
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        raise InvalidAmountError(f"Invalid amount: {value!r}") from None


def to_positive_amount(value: AmountLike, action: str = "Amount") -> Decimal:
    """Convert a value and require it to be strictly positive."""
    amount = to_amount(value)
    if amount <= 0:
        raise InvalidAmountError(f"{action} amount must be positive!")
    return amount


def add_exact(balance: Decimal, amount: Decimal) -> Decimal:
    """Return ``balance + amount``, refusing any sum the context would round.

    Raises
    ------
    InvalidAmountError
        If the sum needs more significant digits than the decimal
        context carries, even when only trailing zero cents would go.
    """
    with localcontext() as ctx:
        ctx.traps[Rounded] = True
        try:
            return balance + amount
        except Rounded:
            raise InvalidAmountError(
                f"Balance would exceed {ctx.prec} significant digits!"
            ) from None
