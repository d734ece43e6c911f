"""Domain constants for the cash drawer registry."""

STORAGE_KEY = "cashDrawerData"

DEFAULT_TARGET_CENTS = 20000

# (name, face value in cents), in display order.
DEFAULT_BILLS = (
    ("$1", 100),
    ("$5", 500),
    ("$10", 1000),
    ("$20", 2000),
    ("$50", 5000),
    ("$100", 10000),
)

DEFAULT_COINS = (
    ("Penny", 1),
    ("Nickel", 5),
    ("Dime", 10),
    ("Quarter", 25),
)

DEFAULT_ROLLS = (
    ("Penny Roll", 50),
    ("Nickel Roll", 200),
    ("Dime Roll", 500),
    ("Quarter Roll", 1000),
)


__all__ = [
    "STORAGE_KEY",
    "DEFAULT_TARGET_CENTS",
    "DEFAULT_BILLS",
    "DEFAULT_COINS",
    "DEFAULT_ROLLS",
]
