"""Currency helpers shared by the domain models."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Convert a number or numeric string into a Decimal amount.

    Floats go through ``str`` so that ``25.5`` becomes ``Decimal("25.5")``
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a currency amount: {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Not a currency amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Not a currency amount: {value!r}")
    return amount


def round_currency(value: Decimal) -> Decimal:
    """Round to two decimal places, halves away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def is_whole_cents(value: Decimal) -> bool:
    """Check that an amount has no more than two decimal places."""
    return value == round_currency(value)
