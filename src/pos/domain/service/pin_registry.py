"""Domain service: Pin Registry.

Pinned products are shown ahead of everything else on the sales screen.
The set survives restarts by being written, in full, to the key-value
store after every toggle.
"""

from __future__ import annotations

import json

import structlog

from pos.domain.exceptions import ServiceError
from pos.domain.gateway.key_value_store import KeyValueStore

logger = structlog.get_logger(__name__)

PINNED_PRODUCTS_KEY = "pinnedProducts"


class PinRegistry:

    def __init__(self, store: KeyValueStore, key: str = PINNED_PRODUCTS_KEY) -> None:
        self._store = store
        self._key = key
        # A dict keeps the stored order stable across toggles.
        self._pinned: dict[int, None] = dict.fromkeys(self._load())

    @property
    def pins(self) -> frozenset[int]:
        return frozenset(self._pinned)

    def is_pinned(self, product_id: int) -> bool:
        return product_id in self._pinned

    def toggle(self, product_id: int) -> frozenset[int]:
        """Pin *product_id* if it is unpinned, unpin it otherwise.

        Returns the new pin set after persisting it.
        """
        pinned = dict(self._pinned)
        if product_id in pinned:
            del pinned[product_id]
        else:
            pinned[product_id] = None
        self._store.set(self._key, json.dumps(list(pinned)))
        self._pinned = pinned
        return self.pins

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[int]:
        """Read the stored pin list; anything unreadable means nothing pinned."""
        try:
            raw = self._store.get(self._key)
        except ServiceError as exc:
            logger.warning("Cannot read pinned products", key=self._key, error=str(exc))
            return []
        if raw is None:
            return []
        try:
            value = json.loads(raw)
        except ValueError as exc:
            logger.warning("Ignoring unreadable pinned products", key=self._key, error=str(exc))
            return []
        if not isinstance(value, list) or not all(
            isinstance(item, int) and not isinstance(item, bool) for item in value
        ):
            logger.warning("Ignoring malformed pinned products", key=self._key, value=raw)
            return []
        return value
