"""Application service: Toggle Pin use case."""

from __future__ import annotations

from pos.domain.gateway.notifier import NotificationKind, Notifier
from pos.domain.service.pin_registry import PinRegistry


class TogglePinHandler:

    def __init__(self, pin_registry: PinRegistry, notifier: Notifier) -> None:
        self._pin_registry = pin_registry
        self._notifier = notifier

    def handle(self, product_id: int) -> bool:
        """Flip the pin on *product_id*; returns True if it is now pinned."""
        pinned = product_id in self._pin_registry.toggle(product_id)
        if pinned:
            self._notifier.notify(
                NotificationKind.INFO, "Product Pinned", "Product added to pinned items"
            )
        else:
            self._notifier.notify(
                NotificationKind.INFO, "Product Unpinned", "Product removed from pinned items"
            )
        return pinned
