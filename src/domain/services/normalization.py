"""Domain normalization helpers for raw user input."""

import re
from decimal import Decimal, InvalidOperation

from src.utils.decimal_utils import to_cents


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_DECIMAL = re.compile(
    r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
)


def normalize_count(raw: str | None) -> int:
    """Parse a count typed by the user.

    Only the leading integer is read, so ``"3.7"`` gives 3 and ``"12abc"``
    gives 12. Input without a leading integer gives 0. The sign is kept;
    callers decide what to do with negative values.

    Args:
        raw: Raw text from the count field.

    Returns:
        int: Parsed count.
    """
    if not raw:
        return 0
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # Digit strings past the interpreter's int conversion limit.
        return 0


def normalize_amount_cents(raw: str | int | float | Decimal | None) -> int:
    """Parse a dollar amount into cents.

    Args:
        raw: Raw text or number from the target field.

    Returns:
        int: Amount in cents, rounded half-up. Unparseable input gives 0.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, (int, float, Decimal)):
        text = str(raw)
    else:
        text = raw
    match = _LEADING_DECIMAL.match(text)
    if match is None:
        return 0
    try:
        return to_cents(Decimal(match.group(1)))
    except InvalidOperation:
        return 0


__all__ = ["normalize_count", "normalize_amount_cents"]
