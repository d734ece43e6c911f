"""Policies for denomination naming."""

from collections.abc import Iterable


class DuplicateDenominationError(ValueError):
    """Raised when a denomination group repeats a name."""


def ensure_unique_names(group: str, names: Iterable[str]) -> None:
    """Reject denomination groups that reuse a name.

    Args:
        group: Group label used in the error message.
        names: Denomination names in registry order.

    Raises:
        DuplicateDenominationError: If a name appears more than once.
    """
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise DuplicateDenominationError(
                f"Duplicate denomination name in {group}: {name!r}"
            )
        seen.add(name)


__all__ = ["DuplicateDenominationError", "ensure_unique_names"]
