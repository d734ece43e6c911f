"""Domain policies package."""

from .denomination_names import DuplicateDenominationError, ensure_unique_names

__all__ = ["DuplicateDenominationError", "ensure_unique_names"]
