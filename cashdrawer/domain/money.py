"""Conversion between major-unit amounts and cents.

Amounts only cross this boundary on the way in (caller input) and on the way
out (settlement results). Everything in between is integer cents.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from cashdrawer.domain.models import Cents

CENT = Decimal("0.01")


def to_cents(amount: Decimal | int | float | str) -> Cents:
    """Convert a major-unit amount to cents, rounding to the nearest cent.

    Floats go through their shortest repr, so 0.1 means ten cents rather than
    the binary approximation. Halves round away from zero.

    Args:
        amount: Amount in dollars.

    Returns:
        Amount in cents.

    Raises:
        ValueError: If the amount is not a finite number.
    """
    if isinstance(amount, bool):
        raise ValueError(f"Invalid amount: {amount!r}")

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount!r}") from None

    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")

    return Cents(int((value * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)))


def to_major(cents: Cents | int) -> Decimal:
    """Convert cents to a dollar Decimal with exactly two places."""
    return (Decimal(cents) / 100).quantize(CENT)


def format_money(cents: Cents | int) -> str:
    """Format cents for display (e.g. "$1,234.50")."""
    sign = "-" if cents < 0 else ""
    return f"{sign}${to_major(abs(cents)):,.2f}"
