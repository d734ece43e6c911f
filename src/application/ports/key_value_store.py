"""Port for the durable key-value store holding drawer state."""

from typing import Protocol


class KeyValueStorePort(Protocol):
    """Port exposing string reads and writes by key."""

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None when absent."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


__all__ = ["KeyValueStorePort"]
