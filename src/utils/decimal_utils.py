"""Helpers for Decimal normalization and cent conversion."""

from decimal import ROUND_HALF_UP, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from storage or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_cents(value) -> int:
    """Convert a dollar amount to integer cents, rounding half-up.

    Args:
        value: Dollar amount as Decimal, int, float, or numeric string.

    Returns:
        int: Amount in cents.
    """
    return int(
        (coerce_decimal(value) * 100).quantize(Decimal("1"), ROUND_HALF_UP)
    )


def from_cents(cents: int) -> Decimal:
    """Convert integer cents to a two-decimal dollar amount.

    The digits are shifted two places without context arithmetic, so the
    result is exact however many digits the amount has.

    Args:
        cents: Amount in cents.

    Returns:
        Decimal: Dollar amount with two fractional digits.
    """
    sign, digits, exponent = Decimal(cents).as_tuple()
    return Decimal((sign, digits, exponent - 2))


__all__ = ["coerce_decimal", "to_cents", "from_cents"]
