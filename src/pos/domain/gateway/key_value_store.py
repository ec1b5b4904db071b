"""Port for the small key-value store that keeps per-terminal settings."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored string, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
